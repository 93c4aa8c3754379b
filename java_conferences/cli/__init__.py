"""
CLI utilities for java_conferences.

This package provides shared functionality for scripts:
- Logging setup
- Argument parsing
- Command entry points
"""

from java_conferences.cli.args import add_logging_arguments, add_year_argument
from java_conferences.cli.commands import run_get_conferences
from java_conferences.cli.logging import print_header, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "print_header",
    # Arguments
    "add_year_argument",
    "add_logging_arguments",
    # Commands
    "run_get_conferences",
]
