"""Command line entry point for extracting contact handles from a page."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import Settings, load_settings
from .extraction import emails_from_text, parse_handles_from_html, phones_from_text
from .fetcher import PageFetcher
from .models import HandleCollection
from .normalization import normalize_handles

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""

    parser = argparse.ArgumentParser(
        description="Extract emails, phone numbers and social profiles from a web page"
    )
    parser.add_argument(
        "source", help="http(s) URL to fetch, path to an HTML file, or '-' to read stdin"
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Treat the input as plain text instead of HTML",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: SITEHANDLES_HTTP_TIMEOUT or 20)",
    )
    return parser


def _handles_from_plain_text(text: str) -> HandleCollection:
    return normalize_handles(
        HandleCollection(emails=emails_from_text(text), phones_uncertain=phones_from_text(text))
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.timeout is not None:
            settings = Settings(**{**settings.model_dump(), "http_timeout": args.timeout})
    except ValidationError as exc:
        parser.error(f"Invalid configuration: {exc}")

    logging.basicConfig(
        level=settings.log_level,
        format="[%(asctime)s] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    source: str = args.source
    if source.startswith(("http://", "https://")):
        fetcher = PageFetcher(http_timeout=settings.http_timeout, user_agent=settings.user_agent)
        content = fetcher.fetch_html(source)
        if content is None:
            print(f"Could not fetch {source}", file=sys.stderr)
            return 2
    elif source == "-":
        content = sys.stdin.read()
    else:
        try:
            content = Path(source).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            print(f"Could not read {source}: {exc}", file=sys.stderr)
            return 2

    if args.text:
        handles = _handles_from_plain_text(content)
    else:
        handles = parse_handles_from_html(content)

    logger.info("Processed %s", source)
    print(json.dumps(handles.to_json_dict(), ensure_ascii=False, indent=args.indent))
    return 1 if handles.is_empty() else 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
