"""Regular expression grammars for emails, phone numbers and social profile URLs."""

from __future__ import annotations

import re
from typing import Dict, List

# Inspired by https://zapier.com/blog/extract-links-email-phone-regex/
EMAIL_PATTERN = (
    r"""(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"""
    r"""|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")"""
    r"""@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"""
    r"""|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"""
    r"""(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?"""
    r"""|[a-z0-9-]*[a-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])"""
)

_FLAGS = re.IGNORECASE | re.ASCII


def build_email_regex(anchored: bool) -> re.Pattern[str]:
    """Compile the email grammar, either matching a whole string or scanning a text."""

    if anchored:
        return re.compile(rf"\A(?:{EMAIL_PATTERN})\Z", _FLAGS)
    return re.compile(EMAIL_PATTERN, _FLAGS)


# Matches a string that is exactly one email address.
EMAIL_REGEX = build_email_regex(anchored=True)

# Finds every email address embedded in a larger text.
EMAIL_REGEX_GLOBAL = build_email_regex(anchored=False)

EMAIL_URL_PREFIX_REGEX = re.compile(r"\Amailto:", re.IGNORECASE)

# Dialer schemes are as unambiguous as tel: itself.
PHONE_URL_PREFIX_REGEX = re.compile(r"\A(?:tel|telprompt|callto|sms|smsto):", re.IGNORECASE)

# Loose phone grammar for free text: an optional "+" or "(", a digit, separators
# and digits, ending on a digit. Runs glued to words, URLs, prices or order
# numbers are skipped by the surrounding lookarounds.
PHONE_REGEX_GLOBAL = re.compile(
    r"(?<![\w+@.\-#$€£/=])\(?\+?\(?\d[\d \t().\-]{5,20}\d(?![\w@])",
    re.ASCII,
)

# E.164 allows at most 15 digits; shorter than 7 is rarely a dialable number.
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

PHONE_FALSE_POSITIVE_REGEXES: List[re.Pattern[str]] = [
    re.compile(r"\d{4}[\-./]\d{1,2}[\-./]\d{1,2}"),
    re.compile(r"\d{1,2}[\-./]\d{1,2}[\-./]\d{4}"),
    re.compile(r"(?:19|20)\d{2}\s*-\s*(?:19|20)\d{2}"),
    re.compile(r"\d{1,3}(?:\.\d{1,3}){3}"),
]

# Profile URLs end where the handle ends; anything after it is not part of the value.
_HANDLE_END = r"(?=[/?#&]|\Z)"


def _profile_url_regex(hosts: str, path: str) -> re.Pattern[str]:
    return re.compile(rf"\A(?:https?:)?//{hosts}/{path}{_HANDLE_END}", _FLAGS)


def _excluding(*paths: str) -> str:
    return rf"(?!(?:{'|'.join(paths)}){_HANDLE_END})"


LINKEDIN_REGEX = _profile_url_regex(
    r"(?:[a-z]{2,3}\.)?linkedin\.com",
    r"(?:(?:in|company)/[\w\-%.]+|pub/[\w\-%.]+(?:/[a-z0-9]{1,3}){3})",
)

TWITTER_REGEX = _profile_url_regex(
    r"(?:www\.|mobile\.)?(?:twitter|x)\.com",
    "@?"
    + _excluding(
        "home", "i", "intent", "share", "search", "hashtag", "login", "logout", "signup",
        "settings", "explore", "notifications", "messages", "tos", "privacy", "account",
        "oauth", "widgets", "about", "download", "compose", "lists", "status",
    )
    + r"[a-z0-9_]{1,15}",
)

INSTAGRAM_REGEX = _profile_url_regex(
    r"(?:www\.|m\.)?(?:instagram\.com|instagr\.am)",
    _excluding(
        "p", "reel", "reels", "tv", "explore", "accounts", "about", "developer", "legal",
        "direct", "stories", "web", "tags", "static",
    )
    + r"[a-z0-9_.]{1,30}",
)

FACEBOOK_REGEX = _profile_url_regex(
    r"(?:www\.|m\.|mobile\.|business\.|[a-z]{2}-[a-z]{2}\.)?(?:facebook\.com|fb\.com|fb\.me)",
    r"(?:profile\.php\?id=\d+|pages/[\w\-%.]+/\d+|"
    + _excluding(
        r"profile\.php", r"sharer(?:\.php)?", r"share(?:\.php)?", "dialog", "plugins",
        r"login(?:\.php)?", "recover", "help", "policies", "privacy", "legal", "terms",
        "groups", "events", "watch", "hashtag", r"photo\.php", "photos", r"l\.php",
        "tr", "ajax", "pages", "marketplace", "gaming", "settings", r"home\.php",
        r"story\.php", r"permalink\.php", "media", "notes", r"rsrc\.php",
    )
    + r"[a-z0-9.\-]{2,50})",
)

SOCIAL_URL_REGEXES: Dict[str, re.Pattern[str]] = {
    "linkedins": LINKEDIN_REGEX,
    "twitters": TWITTER_REGEX,
    "instagrams": INSTAGRAM_REGEX,
    "facebooks": FACEBOOK_REGEX,
}
