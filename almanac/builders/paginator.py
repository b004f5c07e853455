#!/usr/bin/env python3
"""
paginator.py
------------
Split ordered item sequences into pages with navigation slugs.

Functions:
    paginate: Paginate one sequence under one base slug
    paginate_taxonomy: Paginate every group of a taxonomy and concatenate

Page slugs are `{slug}` for the first page and `{slug}/page-{n}` for the
n-th page after it; URLs join the prefix and the page slug with '/'.

Usage:
    pages = paginate(posts, slug="blog", prefix="", title="Blog", page_size=10)
    tag_pages = paginate_taxonomy(group_by(posts, ByField("tags")), "blog/tag", 10)
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from almanac.core.config import DEFAULT_ITEMS_PER_PAGE
from almanac.core.logging_manager import AlmanacLogger, safe_logger
from almanac.dataclasses.page import Page, PageSlugs
from almanac.dataclasses.taxonomy import TaxonomyGroup


def join_url(prefix: str, slug: str) -> str:
    """
    Join a URL prefix and a slug with exactly one '/'.

    Examples:
        >>> join_url("blog/tag", "python")
        'blog/tag/python'
        >>> join_url("", "blog")
        'blog'
        >>> join_url("blog/", "/2024")
        'blog/2024'
    """
    prefix = prefix.rstrip("/")
    slug = slug.lstrip("/")
    if not prefix:
        return slug
    return f"{prefix}/{slug}"


def chunk(items: Sequence[Any], size: int) -> List[List[Any]]:
    """Consecutive chunks of `size` items, the last one possibly shorter."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def paginate(
    items: Sequence[Any],
    slug: str,
    prefix: str,
    title: str,
    page_size: int = DEFAULT_ITEMS_PER_PAGE,
    meta: Optional[Dict[str, Any]] = None,
    children: Optional[Sequence[Any]] = None,
) -> List[Page]:
    """
    Paginate an ordered sequence.

    Args:
        items: Items in display order
        slug: Base slug of the sequence
        prefix: URL prefix the page slugs are joined to
        title: Title shared by every page
        page_size: Maximum items per page
        meta: Extra fields copied onto every page
        children: Entries attached to the first page only

    Returns:
        Pages in order; no pages when there are no items

    Raises:
        ValueError: If page_size is smaller than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    chunks = chunk(items, page_size)
    page_slugs = [
        slug if index == 0 else f"{slug}/page-{index + 1}"
        for index in range(len(chunks))
    ]

    pages: List[Page] = []
    for index, page_items in enumerate(chunks):
        pages.append(
            Page(
                title=title,
                slug=page_slugs[index],
                url=join_url(prefix, page_slugs[index]),
                pagenumber=index,
                count=len(items),
                total=len(page_slugs),
                slugs=PageSlugs(
                    all=page_slugs,
                    next=page_slugs[index + 1] if index + 1 < len(page_slugs) else None,
                    previous=page_slugs[index - 1] if index > 0 else None,
                    first=page_slugs[0],
                    last=page_slugs[-1],
                ),
                items=page_items,
                children=list(children or []) if index == 0 else [],
                meta=dict(meta or {}),
            )
        )
    return pages


def paginate_taxonomy(
    groups: Sequence[TaxonomyGroup],
    prefix: str,
    page_size: int = DEFAULT_ITEMS_PER_PAGE,
    logger: Optional[AlmanacLogger] = None,
) -> List[Page]:
    """
    Paginate each group and concatenate the pages.

    Group order is kept, then page order within a group.

    Args:
        groups: Groups, already sorted
        prefix: URL prefix of the taxonomy (e.g. 'blog/tag')
        page_size: Maximum items per page
        logger: Optional logger

    Returns:
        Flat list of pages
    """
    pages: List[Page] = []
    for group in groups:
        pages.extend(
            paginate(
                group.items,
                slug=group.slug,
                prefix=prefix,
                title=group.title,
                page_size=page_size,
                meta=group.meta,
                children=group.children,
            )
        )

    safe_logger(logger).log_info(
        "Pages created for taxonomy", {"prefix": prefix, "pages": len(pages)}
    )
    return pages
