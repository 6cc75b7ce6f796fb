"""Sorting and deduplication of extracted handles."""

from __future__ import annotations

from typing import Iterable, List

from .models import HANDLE_FIELDS, HandleCollection


def sorted_unique(values: Iterable[str]) -> List[str]:
    """Sort values ascending and drop repeated entries."""

    result: List[str] = []
    for value in sorted(values):
        if not result or result[-1] != value:
            result.append(value)
    return result


def normalize_handles(handles: HandleCollection) -> HandleCollection:
    """Return a copy of ``handles`` with every field sorted and deduplicated.

    Applying it to an already normalized collection returns an equal collection.
    """

    return HandleCollection(
        **{name: sorted_unique(getattr(handles, name)) for name in HANDLE_FIELDS}
    )
