"""
Utilities module for dualdb.

This module provides shared utility functions:
- Logging utilities for consistent logging setup and structured statement logs
"""

from .logging import setup_logging, log_statement_success, log_statement_failure

__all__ = [
    "setup_logging",
    "log_statement_success",
    "log_statement_failure",
]
