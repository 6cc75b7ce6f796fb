"""Utilities for extracting emails, phone numbers and social handles from HTML content."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any, List, Optional
from urllib.parse import unquote

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from .exceptions import InvalidArgumentError
from .models import HandleCollection, PageData
from .normalization import normalize_handles
from .patterns import (
    EMAIL_REGEX,
    EMAIL_REGEX_GLOBAL,
    EMAIL_URL_PREFIX_REGEX,
    PHONE_FALSE_POSITIVE_REGEXES,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
    PHONE_REGEX_GLOBAL,
    PHONE_URL_PREFIX_REGEX,
    SOCIAL_URL_REGEXES,
)

logger = logging.getLogger(__name__)

# Elements whose text is never rendered as page content.
SKIP_TEXT_TAGS = frozenset({"script", "style", "noscript", "template", "svg", "canvas", "title"})

_WHITESPACE_REGEX = re.compile(r"\s+")


def emails_from_text(text: Any) -> List[str]:
    """Extract email addresses from plain text.

    Order of appearance and duplicates are preserved. Anything that is not a
    string yields an empty list.
    """

    if not isinstance(text, str):
        return []
    return [match.group(0) for match in EMAIL_REGEX_GLOBAL.finditer(text)]


def _is_plausible_phone(candidate: str) -> bool:
    digit_count = sum(char.isdigit() for char in candidate)
    if digit_count < PHONE_MIN_DIGITS or digit_count > PHONE_MAX_DIGITS:
        return False
    if any(regex.fullmatch(candidate) for regex in PHONE_FALSE_POSITIVE_REGEXES):
        return False

    depth = 0
    for char in candidate:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def phones_from_text(text: Any) -> List[str]:
    """Extract phone-like strings from plain text.

    The result is a best-effort guess and may contain false positives. Order
    and duplicates are preserved; non-string input yields an empty list.
    """

    if not isinstance(text, str):
        return []

    phones: List[str] = []
    for match in PHONE_REGEX_GLOBAL.finditer(text):
        candidate = match.group(0).strip()
        if not _is_plausible_phone(candidate) and candidate.startswith("("):
            # "(555-123-4567)" in prose: the closing parenthesis is outside the match
            candidate = candidate[1:]
        if _is_plausible_phone(candidate):
            phones.append(candidate)
    return phones


def _ensure_url_list(urls: Any) -> None:
    if isinstance(urls, (str, bytes, bytearray)) or not isinstance(urls, Sequence):
        raise InvalidArgumentError("urls", "a list of URL strings")


def _link_payloads(urls: Any, prefix_regex: re.Pattern[str]) -> List[str]:
    """Return the payload of every URL starting with the given scheme, prefix removed."""

    _ensure_url_list(urls)

    payloads: List[str] = []
    for url in urls:
        if not url or not isinstance(url, str):
            continue
        url = url.strip()
        if not prefix_regex.match(url):
            continue

        payloads.append(prefix_regex.sub("", url, count=1))
    return payloads


def emails_from_urls(urls: Sequence[str]) -> List[str]:
    """Extract email addresses from ``mailto:`` URLs.

    Only payloads that are exactly one valid address are kept. Order and
    duplicates are preserved. Raises ``InvalidArgumentError`` if ``urls`` is
    not a list of URLs.
    """

    emails: List[str] = []
    for payload in _link_payloads(urls, EMAIL_URL_PREFIX_REGEX):
        email = _mailto_address(payload)
        if EMAIL_REGEX.match(email):
            emails.append(email)
    return emails


def _mailto_address(payload: str) -> str:
    # "?" is legal in a local part, so it starts the header fields
    # (mailto:a@b.com?subject=Hi) only when a complete address precedes it.
    parts = payload.split("?")
    for end in range(1, len(parts)):
        head = unquote("?".join(parts[:end])).strip()
        if EMAIL_REGEX.match(head):
            return head
    return unquote(payload).strip()


def phones_from_urls(urls: Sequence[str]) -> List[str]:
    """Extract phone numbers from ``tel:`` and similar dialer URLs.

    The link scheme is trusted, so payloads are not validated further.
    """

    phones: List[str] = []
    for payload in _link_payloads(urls, PHONE_URL_PREFIX_REGEX):
        # sms:+123?body=Hi carries header fields; callto://+123 a leading "//"
        phone = unquote(payload.partition("?")[0]).strip().lstrip("/")
        if phone:
            phones.append(phone)
    return phones


def social_urls_from_urls(urls: Sequence[str], platform: str) -> List[str]:
    """Extract profile URLs of one social platform (``linkedins``, ``twitters``, ...)."""

    _ensure_url_list(urls)
    try:
        regex = SOCIAL_URL_REGEXES[platform]
    except KeyError as exc:
        raise ValueError(f"Unknown social platform: {platform!r}") from exc

    profiles: List[str] = []
    for url in urls:
        if not url or not isinstance(url, str):
            continue
        match = regex.match(url.strip())
        if match:
            profiles.append(match.group(0))
    return profiles


def html_to_text(soup: BeautifulSoup) -> str:
    """Return the visible text of a parsed document as a single line."""

    parts: List[str] = []
    for node in soup.find_all(string=True):
        if isinstance(node, PreformattedString):
            continue
        if any(parent.name in SKIP_TEXT_TAGS for parent in node.parents):
            continue
        parts.append(node)
    return _WHITESPACE_REGEX.sub(" ", " ".join(parts)).strip()


def parse_page(html: Any, data: Optional[PageData] = None) -> PageData:
    """Parse HTML into visible text and anchor URLs, reusing whatever ``data`` supplies."""

    data = data if data is not None else PageData()
    if data.soup is None and (data.text is None or data.link_urls is None):
        if isinstance(html, str):
            # lxml cannot encode lone surrogates
            html = html.encode("utf-8", "replace").decode("utf-8")
        elif not isinstance(html, bytes):
            html = ""
        try:
            data.soup = BeautifulSoup(html, "lxml")
        except (UnicodeError, ParserRejectedMarkup) as exc:
            logger.debug("Could not parse HTML, treating it as empty: %s", exc)
            data.soup = BeautifulSoup("", "lxml")

    if data.text is None:
        data.text = html_to_text(data.soup)
    if data.link_urls is None:
        data.link_urls = [anchor.get("href") for anchor in data.soup.find_all("a", href=True)]
    return data


def parse_handles_from_html(html: Any, data: Optional[PageData] = None) -> HandleCollection:
    """Extract emails, phone numbers and social profile URLs from an HTML document.

    ``phones`` holds numbers from ``tel:`` style links, which are reliable,
    while ``phones_uncertain`` holds phone-like strings from the plain text,
    which may be very inaccurate. Every field of the result is sorted and
    free of duplicates.

    Pass a ``PageData`` instance as ``data`` to receive the visible text,
    the parsed document and the anchor URLs, or to supply them when the
    caller has already parsed the page.
    """

    page = parse_page(html, data)
    text = page.text
    link_urls = page.link_urls

    raw = HandleCollection(
        emails=emails_from_urls(link_urls) + emails_from_text(text),
        phones=phones_from_urls(link_urls),
        phones_uncertain=phones_from_text(text),
        **{platform: social_urls_from_urls(link_urls, platform) for platform in SOCIAL_URL_REGEXES},
    )
    handles = normalize_handles(raw)
    logger.debug(
        "Extracted %d emails, %d phones, %d uncertain phones from %d links",
        len(handles.emails),
        len(handles.phones),
        len(handles.phones_uncertain),
        len(link_urls),
    )
    return handles
