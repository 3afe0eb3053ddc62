"""
Django settings module.

This package contains environment-specific settings:
- base.py: Base settings shared across all environments
- test.py: Test environment settings
- logging.py: Logging configuration
"""
