"""Tests for the HTTP service routes."""

from __future__ import annotations

from fastapi.testclient import TestClient

from sitehandles.service import app

client = TestClient(app)


def test_healthcheck() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_handles_from_html() -> None:
    html = '<p>info@example.com</p><a href="mailto:info@example.com">Mail</a>'
    response = client.post("/handles/from-html", json={"html": html})

    assert response.status_code == 200
    body = response.json()
    assert body["emails"] == ["info@example.com"]
    assert body["phonesUncertain"] == []
    assert body["linkedIns"] == []


def test_emails_from_text() -> None:
    response = client.post("/emails/from-text", json={"text": "a@x.io b@x.io a@x.io"})
    assert response.json() == {"emails": ["a@x.io", "b@x.io", "a@x.io"]}


def test_emails_from_urls() -> None:
    response = client.post(
        "/emails/from-urls", json={"urls": ["mailto:a@x.io", "mailto:broken", "tel:123"]}
    )
    assert response.json() == {"emails": ["a@x.io"]}


def test_phones_from_urls() -> None:
    response = client.post("/phones/from-urls", json={"urls": ["tel:+123456", "mailto:a@x.io"]})
    assert response.json() == {"phones": ["+123456"]}


def test_urls_must_be_a_list() -> None:
    response = client.post("/emails/from-urls", json={"urls": "mailto:a@x.io"})
    assert response.status_code == 422
