#!/usr/bin/env python3
"""
content_item.py
-------------------

Defines the ContentItem class, one unit of site content, and
ContentCollection, the bundled pattern-selection source builders read from.

Builders hold references to ContentItem instances and never copy them.
Computed navigation (siblings, blog parent, forced layout) is written into
the item's metadata bag in place, so templates rendering the item later
see it. Snapshots of metadata taken before a build are stale afterwards.
"""
from __future__ import annotations

# --- Standard Library ---
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Pattern, Protocol, Sequence, Union

# --- Local ---
from almanac.utils.dates import effective_date


@dataclass(eq=False)
class ContentItem:
    """
    A single content item supplied by the host.

    Fields:
    - url:        Public URL of the item
    - date:       Item date (date, datetime, or ISO string)
    - metadata:   Free-form metadata bag (tags, categories, created, draft, ...)
    - input_path: Source path, used only for pattern selection

    Items compare by identity: two items with equal fields are still
    distinct entries of a collection.
    """
    url:        str
    date:       Union[date, str]
    metadata:   Dict[str, Any] = field(default_factory=dict)
    input_path: str            = ""

    @property
    def is_draft(self) -> bool:
        """True when metadata marks the item as a draft."""
        return bool(self.metadata.get("draft"))

    def __repr__(self) -> str:
        return f"ContentItem(url={self.url!r})"


class ContentSource(Protocol):
    """Pattern-based selection offered by the host pipeline."""

    def select_by_pattern(self, patterns: Sequence[str]) -> List[ContentItem]:
        ...


def _normalize_path(path: str) -> str:
    """Strip a leading './' so patterns and paths compare alike."""
    while path.startswith("./"):
        path = path[2:]
    return path


def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compile a glob pattern into a regular expression.

    `*` and `?` stay within one path segment, `**/` spans any number of
    directories (including none).

    Examples:
        >>> bool(compile_pattern("./*.md").fullmatch("post.md"))
        True
        >>> bool(compile_pattern("./*.md").fullmatch("drafts/post.md"))
        False
        >>> bool(compile_pattern("./**/*.md").fullmatch("a/b/post.md"))
        True
    """
    pattern = _normalize_path(pattern)
    parts: List[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(parts))


class ContentCollection:
    """
    In-memory content source.

    Items are kept in host order: oldest first by effective date, then by
    input path. Pattern matching follows glob rules over the input path.

    Attributes:
        items: All items, in host order
    """

    def __init__(self, items: Iterable[ContentItem]) -> None:
        self.items: List[ContentItem] = sorted(
            items, key=lambda item: (effective_date(item), item.input_path)
        )

    def __len__(self) -> int:
        return len(self.items)

    def all(self) -> List[ContentItem]:
        """Every item, in host order."""
        return list(self.items)

    def select_by_pattern(self, patterns: Sequence[str]) -> List[ContentItem]:
        """
        Items whose input path matches any of the patterns.

        Args:
            patterns: Shell-style patterns (e.g. './*.md', 'posts/**/*.md')

        Returns:
            Matching items, in host order
        """
        compiled = [compile_pattern(p) for p in patterns]
        return [
            item
            for item in self.items
            if any(
                regex.fullmatch(_normalize_path(item.input_path))
                for regex in compiled
            )
        ]
