#!/usr/bin/env python3
"""
collections.py
--------------
Flat, unpaginated collections.

Functions:
    filter_by_flag: Published blog items whose metadata flag is truthy
    select_content: Items matching a pattern list, newest first
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from almanac.core.config import AlmanacOptions
from almanac.core.logging_manager import AlmanacLogger, safe_logger
from almanac.dataclasses.content_item import ContentItem, ContentSource


def filter_by_flag(
    source: ContentSource,
    field: str,
    options: AlmanacOptions,
    layout: Optional[str] = None,
    logger: Optional[AlmanacLogger] = None,
) -> List[ContentItem]:
    """
    Blog items where `metadata[field]` is truthy.

    Args:
        source: Host content source
        field: Metadata flag name (e.g. 'page', 'featured')
        options: Build configuration (blog patterns)
        layout: Layout written onto every selected item, if given
        logger: Optional logger

    Returns:
        Selected items in host order, drafts excluded
    """
    selected = [
        item
        for item in source.select_by_pattern(options.blog_paths)
        if not item.is_draft and item.metadata.get(field)
    ]

    if layout:
        for item in selected:
            item.metadata["layout"] = layout

    safe_logger(logger).log_debug(
        "Flag collection built", {"field": field, "items": len(selected)}
    )
    return selected


def select_content(source: ContentSource, patterns: Sequence[str]) -> List[ContentItem]:
    """Items matching the patterns, newest first (drafts included)."""
    return list(reversed(source.select_by_pattern(patterns)))
