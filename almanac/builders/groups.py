#!/usr/bin/env python3
"""
groups.py
---------
Group content items by the values of one grouping dimension.

Every value an item yields is normalized with str_to_slug; values that
collapse to the same slug ("Python", "python", "Python.") share one group
titled after the first label seen. Groups come back sorted by slug,
ascending and case-insensitive.

Usage:
    from almanac.builders.groups import group_by
    from almanac.dataclasses.taxonomy import ByField

    tags = group_by(posts, ByField("tags"))
"""
from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from almanac.core.logging_manager import AlmanacLogger, safe_logger
from almanac.dataclasses.content_item import ContentItem
from almanac.dataclasses.taxonomy import Extractor, TaxonomyGroup
from almanac.utils.dates import date_or_string
from almanac.utils.slugify import str_to_slug


def resolve_values(value: Any) -> List[str]:
    """
    Turn an extracted metadata value into a list of labels.

    A string is a single label, an iterable (other than a mapping) is a
    list of labels. Dates render as YYYY-MM-DD, other scalars through
    str(). None and blank labels are dropped.

    Examples:
        >>> resolve_values("python")
        ['python']
        >>> resolve_values(["a", None, "", "b"])
        ['a', 'b']
        >>> resolve_values(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, str):
        candidates: Sequence[Any] = [value]
    elif isinstance(value, Iterable) and not isinstance(value, Mapping):
        candidates = list(value)
    elif isinstance(value, (date, int, float)) and not isinstance(value, bool):
        candidates = [value]
    else:
        return []

    labels = []
    for candidate in candidates:
        if candidate is None or isinstance(candidate, bool):
            continue
        label = candidate if isinstance(candidate, str) else date_or_string(candidate)
        if label.strip():
            labels.append(label)
    return labels


def slug_sort_key(slug: str) -> Tuple[str, str]:
    """Case- and accent-insensitive ordering key, raw slug as tiebreak."""
    decomposed = unicodedata.normalize("NFKD", slug)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), slug


def group_by(
    items: Sequence[ContentItem],
    extractor: Extractor,
    default: Optional[str] = None,
    logger: Optional[AlmanacLogger] = None,
) -> List[TaxonomyGroup]:
    """
    Group items by the slugs of their extracted values.

    Args:
        items: Items to group, in the order groups should list them
        extractor: ByField or ByFunction value source
        default: Label used when an item yields no value
        logger: Optional logger

    Returns:
        Non-empty groups sorted by slug

    Notes:
        - Items yielding nothing (and no default) are left out of this
          grouping only; it is not an error
        - An item listing two labels with the same slug joins that group once
    """
    log = safe_logger(logger)
    log.log_debug("Collecting distinct values", {"extractor": repr(extractor)})

    groups: Dict[str, TaxonomyGroup] = {}
    skipped = 0

    for item in items:
        labels = resolve_values(extractor.extract(item))
        if not labels and default is not None:
            labels = [default]
        if not labels:
            skipped += 1
            continue

        seen = set()
        for label in labels:
            slug = str_to_slug(label)
            if not slug:
                log.log_debug("Label has an empty slug", {"label": label, "url": item.url})
                continue
            if slug in seen:
                continue
            seen.add(slug)

            group = groups.get(slug)
            if group is None:
                group = groups[slug] = TaxonomyGroup(slug=slug, title=label)
            group.add(item)

    log.log_info(
        "Distinct values found",
        {"groups": len(groups), "items": len(items), "skipped": skipped},
    )
    return sorted(groups.values(), key=lambda g: slug_sort_key(g.slug))
