#!/usr/bin/env python3
"""
page.py
-------------------

Defines Page, one chunk of a paginated collection, together with the
navigation slugs that link it to its neighbours.

Extra fields passed by a builder (calendar year/month data, for instance)
live in `meta`. They are readable as attributes (`page.type`) and appear
at the top level of `to_dict()`, the shape handed to templates.
"""
from __future__ import annotations

# --- Standard Library ---
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PageSlugs:
    """
    Navigation slugs of a page.

    Fields:
    - all:      Slugs of every page of the sequence
    - next:     Slug of the following page, None on the last page
    - previous: Slug of the preceding page, None on the first page
    - first:    Slug of the first page
    - last:     Slug of the last page
    """
    all:      List[str]
    next:     Optional[str]
    previous: Optional[str]
    first:    Optional[str]
    last:     Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "all": list(self.all),
            "next": self.next,
            "previous": self.previous,
            "first": self.first,
            "last": self.last,
        }


@dataclass(eq=False)
class Page:
    """
    One page of a paginated sequence.

    Fields:
    - title:      Display title shared by all pages of the sequence
    - slug:       Page slug ('tag' for page 0, 'tag/page-2' afterwards)
    - url:        Page URL (prefix joined with slug)
    - pagenumber: 0-based page index
    - count:      Number of items across all pages of the sequence
    - total:      Number of pages in the sequence
    - slugs:      Navigation slugs
    - items:      Items on this page
    - children:   Child entries, only on page 0
    - meta:       Extra fields merged in by the builder
    """
    title:      str
    slug:       str
    url:        str
    pagenumber: int
    count:      int
    total:      int
    slugs:      PageSlugs
    items:      List[Any]      = field(default_factory=list)
    children:   List[Any]      = field(default_factory=list)
    meta:       Dict[str, Any] = field(default_factory=dict)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not regular fields
        meta = self.__dict__.get("meta") or {}
        if name in meta:
            return meta[name]
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"Page(url={self.url!r}, pagenumber={self.pagenumber})"

    def to_dict(self) -> Dict[str, Any]:
        """Template-facing dictionary, with meta keys at the top level."""
        data: Dict[str, Any] = {
            "title": self.title,
            "slug": self.slug,
            "url": self.url,
            "pagenumber": self.pagenumber,
            "count": self.count,
            "total": self.total,
            "slugs": self.slugs.to_dict(),
            "items": list(self.items),
            "children": list(self.children),
        }
        data.update(self.meta)
        return data
