"""
ErrorSinkService Django project.
"""
