"""Fetch and print today's lunch menu.

Finds the PDF for the current (or requested) week and weekday on the menu
listing page, downloads it, and prints the English page of the menu.
"""
import argparse
import logging
import os
import sys
from contextlib import suppress
from datetime import date

import requests

from . import config
from .errors import MenuError
from .get_menu import MenuScraper
from .pdf_menu import clean_menu_text, extract_page_text
from .weekdays import resolve_target


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="lunch-menu",
        description="Fetch the lunch menu PDF for a week and weekday and print its English page.",
    )
    parser.add_argument(
        "--week",
        "-w",
        default=None,
        help="ISO week number (1-53); defaults to the current week",
    )
    parser.add_argument(
        "--day",
        "-d",
        default=None,
        help="Weekday in Danish or English (e.g. mandag or monday); defaults to today",
    )
    parser.add_argument(
        "--no-allergies",
        "-na",
        action="store_true",
        help="Remove allergy information (numbers in parentheses) from the menu",
    )
    parser.add_argument(
        "--url",
        default=config.MENU_URL,
        help="Menu listing page to search for PDFs",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every candidate PDF link and the week inferred for it",
    )
    return parser


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_menu(target, menu_text):
    rule = "=" * config.BANNER_WIDTH
    print("")
    print(rule)
    print(f"MENU FOR {target.weekday.danish.upper()} - WEEK {target.week_number}")
    print(rule)
    print("")
    print(menu_text)
    print("")
    print(rule)


def _read_menu(pdf_path, no_allergies):
    try:
        print("Parsing PDF...")
        menu_text = extract_page_text(pdf_path, config.ENGLISH_MENU_PAGE)
    finally:
        with suppress(OSError):
            os.remove(pdf_path)
    return clean_menu_text(menu_text, no_allergies=no_allergies)


def _run_once(args, today=None):
    target = resolve_target(today or date.today(), week=args.week, day=args.day)
    print(f"Fetching menu for Week {target.week_number}, {target.weekday.danish} ({target.weekday.english})...")
    print("")

    scraper = MenuScraper(args.url)

    print("Fetching menu page...")
    html = scraper.get_html()

    print("Finding PDF link...")
    pdf_url = scraper.find_pdf_url(target, html=html)
    print(f"Found PDF: {pdf_url}")

    print("Downloading PDF...")
    pdf_path = scraper.download_pdf(pdf_url)

    menu_text = _read_menu(pdf_path, args.no_allergies)
    _print_menu(target, menu_text)
    return 0


def main(argv=None, today=None):
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _run_once(args, today=today)
    except (MenuError, requests.RequestException, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        logging.getLogger(__name__).debug("Unexpected failure", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
