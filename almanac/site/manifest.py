#!/usr/bin/env python3
"""
manifest.py
-----------
Load already-extracted content items from a YAML manifest.

The manifest is the hand-off format between a site generator and the
command line tools; metadata is taken as-is, no document is parsed.

Format:
    items:
      - url: blog/first-post
        date: 2024-01-15
        input_path: ./first-post.md
        metadata:
          tags: [python, notes]
          categories: [essay]

Usage:
    from almanac.site.manifest import load_manifest

    source = ContentCollection(load_manifest(Path("site.yaml")))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, List, Mapping

# --- Third party imports ---
import yaml

# --- Local imports ---
from almanac.core.exceptions import ManifestError
from almanac.dataclasses.content_item import ContentItem


def item_from_mapping(data: Mapping[str, Any], index: int) -> ContentItem:
    """
    Build a ContentItem from one manifest entry.

    Args:
        data: Manifest entry
        index: Position in the manifest, for error messages

    Raises:
        ManifestError: If the entry is not a mapping or lacks url/date
    """
    if not isinstance(data, Mapping):
        raise ManifestError(f"Manifest item {index} is not a mapping")

    url = data.get("url")
    if not isinstance(url, str) or not url:
        raise ManifestError(f"Manifest item {index} has no url")

    metadata = data.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        raise ManifestError(f"Manifest item {index} metadata is not a mapping")

    item_date = data.get("date", metadata.get("date"))
    if item_date is None:
        raise ManifestError(f"Manifest item {index} ({url}) has no date")

    return ContentItem(
        url=url,
        date=item_date,
        metadata=dict(metadata),
        input_path=str(data.get("input_path") or ""),
    )


def load_manifest(path: Path) -> List[ContentItem]:
    """
    Read every content item listed in a YAML manifest.

    Args:
        path: Manifest file

    Returns:
        Items in manifest order

    Raises:
        ManifestError: If the file is missing, unparseable, or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ManifestError(f"Cannot parse {path}: {e}") from e

    if isinstance(data, Mapping):
        entries = data.get("items")
    else:
        entries = data
    if not isinstance(entries, list):
        raise ManifestError(f"{path} must contain a list of items")

    return [item_from_mapping(entry, index) for index, entry in enumerate(entries)]
