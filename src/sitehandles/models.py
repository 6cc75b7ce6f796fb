"""Pydantic models for extracted contact handles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field

# Every list field of HandleCollection, in serialization order.
HANDLE_FIELDS = (
    "emails",
    "phones",
    "phones_uncertain",
    "linkedins",
    "twitters",
    "instagrams",
    "facebooks",
)


class HandleCollection(BaseModel):
    """Emails, phone numbers and social profile URLs found in one document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    emails: List[str] = Field(default_factory=list, description="Email addresses")
    phones: List[str] = Field(
        default_factory=list, description="Phone numbers from tel: and similar links"
    )
    phones_uncertain: List[str] = Field(
        default_factory=list,
        alias="phonesUncertain",
        description="Phone-like strings found in the plain text, possibly inaccurate",
    )
    linkedins: List[str] = Field(
        default_factory=list, alias="linkedIns", description="LinkedIn profile URLs"
    )
    twitters: List[str] = Field(default_factory=list, description="Twitter / X profile URLs")
    instagrams: List[str] = Field(default_factory=list, description="Instagram profile URLs")
    facebooks: List[str] = Field(default_factory=list, description="Facebook profile URLs")

    def is_empty(self) -> bool:
        """Return True when no field holds any value."""

        return not any(getattr(self, name) for name in HANDLE_FIELDS)

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the collection keyed by its public (camelCase) field names."""

        return self.model_dump(by_alias=True)


@dataclass
class PageData:
    """Parsed views of an HTML page shared between the caller and the extractor.

    Attributes left as ``None`` are computed by ``parse_handles_from_html`` and
    written back, so the caller can reuse them without parsing the page again.
    """

    text: Optional[str] = None
    soup: Optional[BeautifulSoup] = None
    link_urls: Optional[List[str]] = None
