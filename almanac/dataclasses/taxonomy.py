#!/usr/bin/env python3
"""
taxonomy.py
-------------------

Defines TaxonomyGroup, the bucket of items sharing one normalized value of
a grouping dimension (a tag, a category, a calendar date), and the two
ways of pulling grouping values out of an item.

Calendar year and month nodes are TaxonomyGroups whose `meta` carries
`type`, `year` and, for months, `month` and `shortTitle`.
"""
from __future__ import annotations

# --- Standard Library ---
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Union

# --- Local ---
from almanac.dataclasses.content_item import ContentItem


@dataclass(frozen=True)
class ByField:
    """Read grouping values from `item.metadata[name]`."""
    name: str

    def extract(self, item: ContentItem) -> Any:
        return item.metadata.get(self.name)


@dataclass(frozen=True)
class ByFunction:
    """Compute grouping values by calling `extractor(item)`."""
    extractor: Callable[[ContentItem], Any]

    def extract(self, item: ContentItem) -> Any:
        return self.extractor(item)


Extractor = Union[ByField, ByFunction]


@dataclass(eq=False)
class TaxonomyGroup:
    """
    A group of items sharing one slug.

    Fields:
    - slug:     Normalized value shared by every item of the group
    - title:    Original label of the first value seen for this slug
    - items:    Items in the order they were grouped
    - meta:     Extra page fields (calendar node type, year, month, ...)
    - children: Entries shown inline on the group's first page
    """
    slug:     str
    title:    str
    items:    List[ContentItem] = field(default_factory=list)
    meta:     Dict[str, Any]    = field(default_factory=dict)
    children: List[Any]         = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of items in the group."""
        return len(self.items)

    def add(self, item: ContentItem) -> None:
        """Append an item to the group."""
        self.items.append(item)

    def __repr__(self) -> str:
        return f"TaxonomyGroup(slug={self.slug!r}, count={self.count})"
