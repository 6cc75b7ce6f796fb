"""Unit tests for the email, phone and social profile grammars."""

from __future__ import annotations

from sitehandles.patterns import (
    EMAIL_PATTERN,
    EMAIL_REGEX,
    EMAIL_REGEX_GLOBAL,
    EMAIL_URL_PREFIX_REGEX,
    FACEBOOK_REGEX,
    INSTAGRAM_REGEX,
    LINKEDIN_REGEX,
    PHONE_URL_PREFIX_REGEX,
    TWITTER_REGEX,
)


def test_anchored_and_scanning_forms_share_one_grammar() -> None:
    assert EMAIL_REGEX_GLOBAL.pattern == EMAIL_PATTERN
    assert EMAIL_PATTERN in EMAIL_REGEX.pattern


def test_anchored_email_regex_accepts_single_addresses() -> None:
    assert EMAIL_REGEX.match("alice@example.com")
    assert EMAIL_REGEX.match("BOB@EXAMPLE.COM")
    assert EMAIL_REGEX.match("first.last+tag@mail.example.co.uk")
    assert EMAIL_REGEX.match('"john.doe"@example.com')
    assert EMAIL_REGEX.match("root@[192.168.0.1]")


def test_anchored_email_regex_rejects_partial_matches() -> None:
    assert not EMAIL_REGEX.match("alice@example.com trailing")
    assert not EMAIL_REGEX.match("alice@example.com\n")
    assert not EMAIL_REGEX.match("a@x.com,b@x.com")
    assert not EMAIL_REGEX.match("not-an-email")
    assert not EMAIL_REGEX.match("jörg@example.com")


def test_scanning_email_regex_finds_embedded_addresses() -> None:
    text = "Write to a@b.co and C@D.IO today"
    assert EMAIL_REGEX_GLOBAL.findall(text) == ["a@b.co", "C@D.IO"]


def test_url_prefix_regexes_only_match_the_scheme() -> None:
    assert EMAIL_URL_PREFIX_REGEX.match("MAILTO:someone@example.com")
    assert not EMAIL_URL_PREFIX_REGEX.match("https://example.com/mailto:someone@example.com")
    assert PHONE_URL_PREFIX_REGEX.match("tel:+123")
    assert PHONE_URL_PREFIX_REGEX.match("Callto:+123")
    assert not PHONE_URL_PREFIX_REGEX.match("hotel:123")


def test_linkedin_profiles() -> None:
    match = LINKEDIN_REGEX.match("https://www.linkedin.com/in/alan-turing/")
    assert match and match.group(0) == "https://www.linkedin.com/in/alan-turing"
    assert LINKEDIN_REGEX.match("https://uk.linkedin.com/company/apify")
    assert not LINKEDIN_REGEX.match("https://www.linkedin.com/feed/")


def test_twitter_profiles() -> None:
    match = TWITTER_REGEX.match("https://twitter.com/apify?lang=en")
    assert match and match.group(0) == "https://twitter.com/apify"
    assert TWITTER_REGEX.match("https://x.com/elonmusk")
    assert not TWITTER_REGEX.match("https://twitter.com/intent/tweet?text=hi")
    assert not TWITTER_REGEX.match("https://twitter.com/this_handle_is_far_too_long")


def test_instagram_profiles() -> None:
    match = INSTAGRAM_REGEX.match("https://instagram.com/natgeo/")
    assert match and match.group(0) == "https://instagram.com/natgeo"
    assert not INSTAGRAM_REGEX.match("https://www.instagram.com/p/abc123/")


def test_facebook_profiles() -> None:
    assert FACEBOOK_REGEX.match("https://facebook.com/apifytech")
    match = FACEBOOK_REGEX.match("https://www.facebook.com/profile.php?id=12345")
    assert match and match.group(0) == "https://www.facebook.com/profile.php?id=12345"
    assert not FACEBOOK_REGEX.match("https://www.facebook.com/sharer/sharer.php?u=x")
    assert not FACEBOOK_REGEX.match("https://www.facebook.com/sharer.php?u=x")
