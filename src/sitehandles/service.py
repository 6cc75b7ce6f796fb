"""HTTP service exposing the handle extractors."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .exceptions import InvalidArgumentError
from .extraction import (
    emails_from_text,
    emails_from_urls,
    parse_handles_from_html,
    phones_from_urls,
)


class HandlesFromHtmlRequest(BaseModel):
    html: str = Field(..., description="Raw HTML document")


class EmailsFromTextRequest(BaseModel):
    text: str


class UrlsRequest(BaseModel):
    urls: List[str] = Field(..., description="Link URLs, e.g. anchor hrefs")


class EmailsResponse(BaseModel):
    emails: List[str]


class PhonesResponse(BaseModel):
    phones: List[str]


app = FastAPI(title="Site handles service")


@app.post("/handles/from-html")
def handles_from_html(payload: HandlesFromHtmlRequest) -> Dict[str, Any]:
    try:
        return parse_handles_from_html(payload.html).to_json_dict()
    except Exception as exc:  # noqa: BLE001
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/emails/from-text", response_model=EmailsResponse)
def extract_emails_from_text(payload: EmailsFromTextRequest) -> EmailsResponse:
    return EmailsResponse(emails=emails_from_text(payload.text))


@app.post("/emails/from-urls", response_model=EmailsResponse)
def extract_emails_from_urls(payload: UrlsRequest) -> EmailsResponse:
    try:
        return EmailsResponse(emails=emails_from_urls(payload.urls))
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/phones/from-urls", response_model=PhonesResponse)
def extract_phones_from_urls(payload: UrlsRequest) -> PhonesResponse:
    try:
        return PhonesResponse(phones=phones_from_urls(payload.urls))
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sitehandles.service:app", host="0.0.0.0", port=8000, reload=False)
