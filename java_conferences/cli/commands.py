"""
CLI command entry points for java_conferences.

These functions are registered as console scripts in pyproject.toml.
"""

import argparse
import json

from java_conferences.cli.args import add_logging_arguments, add_year_argument
from java_conferences.cli.logging import print_header, setup_logging
from java_conferences.parsing.conferences import parse
from java_conferences.service import determine_target_year, get_java_conferences
from java_conferences.sources.github import fetch_markdown_content


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the java-conferences command."""
    parser = argparse.ArgumentParser(
        description="List Java conferences from the javaconferences README as JSON",
    )
    add_year_argument(parser)
    parser.add_argument("--url", default=None, help="Override the markdown document URL")
    parser.add_argument(
        "--all",
        action="store_true",
        dest="all_years",
        help="Return conferences from every year section (ignores --year)",
    )
    add_logging_arguments(parser)
    return parser


def run_get_conferences(argv: list[str] | None = None) -> int:
    """Entry point for java-conferences command."""
    args = build_parser().parse_args(argv)
    logger = setup_logging("get_java_conferences", log_to_file=args.log_file, verbose=args.verbose)

    if args.all_years:
        print_header("Java Conferences (all years)", logger)
        content = fetch_markdown_content(url=args.url)
        conferences = parse(content)
    else:
        print_header(f"Java Conferences ({determine_target_year(args.year)})", logger)
        conferences = get_java_conferences(args.year, url=args.url)

    print(json.dumps([conf.to_dict() for conf in conferences], indent=2, ensure_ascii=False))
    logger.info(f"{len(conferences)} conferences")
    return 0
