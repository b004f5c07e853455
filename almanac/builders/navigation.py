#!/usr/bin/env python3
"""
navigation.py
-------------
Cross-collection lookups used while rendering.

Functions:
    flatten_unique: Merge lists of entries into one url-unique, url-sorted list
    resolve_breadcrumbs: Walk parent links from a url up to the root

Entries may be ContentItems, Pages, or plain mappings; each needs a `url`.
The parent of an entry is `blog.parent` read from its `metadata` (content
items) or `meta` (pages), or from the mapping itself.

Usage:
    pool = flatten_unique([collections["blog_flat"], collections["calendar"]])
    trail = resolve_breadcrumbs(collections, "posts/winter", base="blog")
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from almanac.builders.paginator import join_url
from almanac.core.exceptions import FlattenError
from almanac.core.logging_manager import AlmanacLogger, safe_logger


def url_of(entry: Any) -> str:
    """
    URL of an entry.

    Raises:
        FlattenError: If the entry has no string url
    """
    url = entry.get("url") if isinstance(entry, Mapping) else getattr(entry, "url", None)
    if not isinstance(url, str):
        raise FlattenError(f"Entry has no url: {entry!r}")
    return url


def parent_of(entry: Any) -> Optional[str]:
    """Declared `blog.parent` of an entry, if any."""
    if isinstance(entry, Mapping):
        bag: Any = entry.get("metadata", entry)
    else:
        bag = getattr(entry, "metadata", None)
        if bag is None:
            bag = getattr(entry, "meta", None)
    if not isinstance(bag, Mapping):
        return None
    blog = bag.get("blog")
    if not isinstance(blog, Mapping):
        return None
    parent = blog.get("parent")
    return parent if isinstance(parent, str) else None


def flatten_unique(
    lists: Iterable[Iterable[Any]],
    logger: Optional[AlmanacLogger] = None,
) -> Optional[List[Any]]:
    """
    Flatten one level, keep the first entry per url, sort by url.

    Args:
        lists: Iterable of entry lists
        logger: Optional logger

    Returns:
        Unique entries sorted by url, or None when the input is malformed

    Examples:
        flatten_unique([[a, b], [b, c]]) with a.url == c.url == 'x' and
        b.url == 'y' gives [a, b]
    """
    try:
        seen: Dict[str, Any] = {}
        for entries in lists:
            if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
                raise FlattenError(f"Expected a list of entries, got {type(entries).__name__}")
            for entry in entries:
                url = url_of(entry)
                if url not in seen:
                    seen[url] = entry
    except (FlattenError, TypeError) as e:
        safe_logger(logger).log_error(e, {"operation": "flatten_unique"})
        return None

    return [seen[url] for url in sorted(seen)]


def _lookup(by_url: Dict[str, Any], url: str, base: Optional[str]) -> Tuple[str, Any]:
    """Entry at `url`, else at `url` joined to `base`; (resolved url, entry or None)."""
    entry = by_url.get(url)
    if entry is None and base:
        joined = join_url(base, url)
        if joined in by_url:
            return joined, by_url[joined]
    return url, entry


def resolve_breadcrumbs(
    collections: Union[Mapping[str, Iterable[Any]], Iterable[Iterable[Any]]],
    target_url: str,
    logger: Optional[AlmanacLogger] = None,
    base: Optional[str] = None,
) -> List[str]:
    """
    Breadcrumb trail from `target_url` up through its parents.

    Args:
        collections: Named collections (mapping) or a list of collections
        target_url: URL to start from
        logger: Optional logger
        base: URL root that relative parents are joined to when they are
            not a URL in the pool themselves (the blog slug, so a post's
            'YYYY/MM' parent finds the 'blog/YYYY/MM' calendar page)

    Returns:
        URLs from the target to the root; empty if the target is unknown

    Notes:
        - The walk stops at an entry without parent, a parent equal to the
          entry's own url, or a parent missing from the pool
        - A parent chain that loops back is cut at the first repeated url
    """
    log = safe_logger(logger)
    lists = collections.values() if isinstance(collections, Mapping) else collections
    pool = flatten_unique(lists, logger)
    if not pool:
        return []

    by_url = {url_of(entry): entry for entry in pool}
    trail: List[str] = []
    visited = set()
    search_for: Optional[str] = target_url

    while search_for:
        url, entry = _lookup(by_url, search_for, base)
        if url in visited:
            log.log_warning(
                "Breadcrumb parent cycle", {"target": target_url, "url": url}
            )
            break
        visited.add(url)

        if entry is None:
            break
        trail.append(url)

        parent = parent_of(entry)
        if parent in (search_for, url):
            break
        search_for = parent

    return trail
