"""
Argument parsing utilities for java_conferences CLI.

Provides standard argument patterns used across scripts.
"""


def add_year_argument(parser):
    """
    Add standard --year argument to an ArgumentParser.

    Kept as a string so invalid values fall back to the current year
    instead of failing argument parsing.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--year",
        "-y",
        default=None,
        help="Year to list conferences for (default: current year)",
    )


def add_logging_arguments(parser):
    """
    Add standard --log-file and --verbose arguments to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a DEBUG log file under logs/",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show DEBUG messages on the console",
    )
