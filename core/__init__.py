"""
Core module for process error handling.

This module contains:
- Severity classification and domain exceptions
- The error handler and its runtime hook and logger ports
- Django middleware and app wiring
"""
