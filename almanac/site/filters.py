#!/usr/bin/env python3
"""
filters.py
----------
Template helper filters over built collections.

Filters:
    - top: First N items of a paginated collection's first page
    - dateformat: Format a date-like value with strftime
    - first: Only the first page of every paginated sequence
    - keys: Sorted keys of a mapping
    - field: Pluck one field from each entry

Breadcrumbs, flatten and slug filters are the navigation and slugify
functions themselves; plugin.configure() registers all of them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

# --- Local imports ---
from almanac.dataclasses.page import Page
from almanac.utils.dates import to_datetime


def top(pages: Sequence[Page], limit: int) -> Optional[List[Any]]:
    """
    First `limit` items of the first page.

    Args:
        pages: Paginated collection
        limit: Number of items

    Returns:
        Item list, or None when the collection has no first page
    """
    if not pages:
        return None
    items = getattr(pages[0], "items", None)
    if items is None:
        return None
    return list(items[:limit])


def dateformat(value: Any, fmt: str = "%Y-%m-%d") -> str:
    """
    Format a date, datetime or ISO date string.

    Returns:
        Formatted date string, or empty string if value is empty or not a date
    """
    moment = to_datetime(value)
    if moment is None:
        return ""
    return moment.strftime(fmt)


def first(pages: Sequence[Page]) -> List[Page]:
    """Pages with pagenumber 0 (one per group of a taxonomy)."""
    return [page for page in pages if page.pagenumber == 0]


def keys(mapping: Mapping) -> List[Any]:
    """Sorted keys of a mapping."""
    return sorted(mapping.keys(), key=str)


def field(entries: Sequence[Any], name: str) -> List[Any]:
    """
    Value of `name` for each entry.

    Looks in the entry's metadata first (content items), then the entry
    itself (pages, mappings); missing values come back as None.
    """
    values = []
    for entry in entries:
        if isinstance(entry, Mapping):
            values.append(entry.get(name))
            continue
        metadata = getattr(entry, "metadata", None)
        if isinstance(metadata, Mapping) and name in metadata:
            values.append(metadata[name])
        else:
            values.append(getattr(entry, name, None))
    return values
