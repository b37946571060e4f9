"""Command-line entry point.

Usage:
    python -m src.cli [--language CODE] [--check sum|product|both] WORD [WORD ...]

Prints `true`/`false` for each requested parity fact. Exits with status 2 on an unrecognized word.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from src.app import create_checker
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.parity.checker import UnrecognizedTokenError
from src.parity.lexicons import supported_languages

logger = logging.getLogger(__name__)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check sum/product parity of number words.")
    parser.add_argument(
        "--language",
        choices=supported_languages(),
        default=None,
        help="Lexicon language (default: PARITY_LANGUAGE or 'en').",
    )
    parser.add_argument(
        "--check",
        choices=("sum", "product", "both"),
        default="both",
        help="Which parity fact to print (default: both).",
    )
    parser.add_argument("words", nargs="*", help="Number words; joined with spaces.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""

    load_dotenv()
    args = _build_parser().parse_args(argv)

    overrides = {"language": args.language} if args.language else {}
    settings = load_settings(**overrides)
    configure_logging(settings.log_level)

    checker = create_checker(settings)
    text = " ".join(args.words)

    try:
        report = checker.report(text)
    except UnrecognizedTokenError as exc:
        logger.info("unrecognized token=%r language=%s", exc.token, settings.language)
        print(str(exc), file=sys.stderr)
        return 2

    logger.info(
        "checked language=%s numbers=%d sum_even=%s product_even=%s",
        settings.language,
        len(report.numbers),
        report.sum_is_even,
        report.product_is_even,
    )
    if args.check in ("sum", "both"):
        print(f"sum_is_even={_format_bool(report.sum_is_even)}")
    if args.check in ("product", "both"):
        print(f"product_is_even={_format_bool(report.product_is_even)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
