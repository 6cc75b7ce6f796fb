"""Extract emails, phone numbers and social profile URLs from web pages."""

from .exceptions import InvalidArgumentError
from .extraction import (
    emails_from_text,
    emails_from_urls,
    parse_handles_from_html,
    parse_page,
    phones_from_text,
    phones_from_urls,
    social_urls_from_urls,
)
from .fetcher import PageFetcher
from .models import HandleCollection, PageData
from .normalization import normalize_handles
from .patterns import EMAIL_REGEX, EMAIL_REGEX_GLOBAL

__all__ = [
    "EMAIL_REGEX",
    "EMAIL_REGEX_GLOBAL",
    "HandleCollection",
    "InvalidArgumentError",
    "PageData",
    "PageFetcher",
    "emails_from_text",
    "emails_from_urls",
    "normalize_handles",
    "parse_handles_from_html",
    "parse_page",
    "phones_from_text",
    "phones_from_urls",
    "social_urls_from_urls",
]
