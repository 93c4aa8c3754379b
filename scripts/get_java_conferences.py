#!/usr/bin/env python3
"""
Print Java conferences for a year as JSON.

Fetches the javaconferences README, parses every H3 year section and
prints the conferences for the requested year (current year by default).

Usage:
    python scripts/get_java_conferences.py --year 2025
    python scripts/get_java_conferences.py --all --log-file
"""

import sys

from java_conferences.cli.commands import run_get_conferences

if __name__ == "__main__":
    sys.exit(run_get_conferences())
