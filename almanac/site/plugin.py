#!/usr/bin/env python3
"""
plugin.py
---------
Register the standard blog collections and filters on a registry.

Collections:
    - blog_flat: Published posts, newest first, annotated
    - all: Everything matching the 'all' patterns, newest first
    - pages: Blog items flagged `page: true`
    - blog: Paginated feed
    - tag: Paginated tag taxonomy (field `tags`)
    - category: Paginated category taxonomy (field `categories`)
    - calendar: Paginated year/month calendar

Filters:
    blog_top, blog_slug, blog_dateformat, blog_first, blog_breadcrumbs,
    blog_flatten, blog_keys, blog_field

Every function takes the options explicitly; nothing is remembered
between calls.

Usage:
    registry = CollectionRegistry(logger)
    configure(registry, AlmanacOptions.from_yaml(config_path), logger)
    collections = registry.build(source)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Local imports ---
from almanac.builders.blog import BlogBuilder
from almanac.builders.calendar import CalendarBuilder
from almanac.builders.collections import filter_by_flag, select_content
from almanac.builders.navigation import flatten_unique, resolve_breadcrumbs
from almanac.builders.taxonomy import TaxonomyBuilder
from almanac.core.config import AlmanacOptions
from almanac.core.exceptions import ConfigurationError
from almanac.core.logging_manager import AlmanacLogger, safe_logger
from almanac.dataclasses.taxonomy import Extractor
from almanac.site import filters
from almanac.site.registry import CollectionRegistry
from almanac.utils.slugify import str_to_slug


def _require_options(options: AlmanacOptions) -> AlmanacOptions:
    """Fail fast on a missing or invalid configuration."""
    if not isinstance(options, AlmanacOptions):
        raise ConfigurationError(
            f"Expected AlmanacOptions, got {type(options).__name__}"
        )
    options.validate()
    return options


def generate_taxonomy(
    registry: CollectionRegistry,
    field: str | Extractor,
    taxonomy: str,
    options: AlmanacOptions,
    logger: Optional[AlmanacLogger] = None,
) -> None:
    """
    Register a paginated taxonomy collection named `taxonomy`.

    Args:
        registry: Target registry
        field: Metadata field (or extractor) providing the values
        taxonomy: Collection name and URL segment (e.g. 'tag')
        options: Build configuration
        logger: Optional logger
    """
    _require_options(options)
    safe_logger(logger).log_debug("Registering taxonomy", {"taxonomy": taxonomy})
    registry.add_collection(
        taxonomy,
        lambda source: TaxonomyBuilder(options, field, taxonomy, logger).build(source),
    )


def generate_paginated_blog(
    registry: CollectionRegistry,
    options: AlmanacOptions,
    logger: Optional[AlmanacLogger] = None,
) -> None:
    """Register the paginated `blog` feed."""
    _require_options(options)
    registry.add_collection(
        "blog", lambda source: BlogBuilder(options, logger).build(source)
    )


def generate_calendar(
    registry: CollectionRegistry,
    options: AlmanacOptions,
    logger: Optional[AlmanacLogger] = None,
) -> None:
    """Register the paginated `calendar` collection."""
    _require_options(options)
    registry.add_collection(
        "calendar", lambda source: CalendarBuilder(options, logger).build(source)
    )


def generate_boolean_collection(
    registry: CollectionRegistry,
    collection_name: str,
    field: str,
    options: AlmanacOptions,
    layout: Optional[str] = None,
    logger: Optional[AlmanacLogger] = None,
) -> None:
    """Register a flat collection of blog items flagged by `field`."""
    _require_options(options)
    registry.add_collection(
        collection_name,
        lambda source: filter_by_flag(source, field, options, layout, logger),
    )


def configure(
    registry: CollectionRegistry,
    options: AlmanacOptions,
    logger: Optional[AlmanacLogger] = None,
) -> CollectionRegistry:
    """
    Register every standard collection and filter.

    Args:
        registry: Target registry
        options: Build configuration
        logger: Optional logger

    Returns:
        The registry, for chaining

    Raises:
        ConfigurationError: If options are invalid or a name is already taken
    """
    _require_options(options)

    registry.add_collection(
        "blog_flat", lambda source: BlogBuilder(options, logger).posts(source)
    )
    registry.add_collection(
        "all", lambda source: select_content(source, options.all_paths)
    )
    generate_boolean_collection(registry, "pages", "page", options, logger=logger)
    generate_paginated_blog(registry, options, logger)
    generate_taxonomy(registry, "tags", "tag", options, logger)
    generate_taxonomy(registry, "categories", "category", options, logger)
    generate_calendar(registry, options, logger)

    registry.add_filter("blog_top", filters.top)
    registry.add_filter("blog_slug", str_to_slug)
    registry.add_filter("blog_dateformat", filters.dateformat)
    registry.add_filter("blog_first", filters.first)
    registry.add_filter(
        "blog_breadcrumbs",
        lambda collections, url: resolve_breadcrumbs(
            collections, url, logger, base=options.blog_slug
        ),
    )
    registry.add_filter(
        "blog_flatten", lambda lists: flatten_unique(lists, logger)
    )
    registry.add_filter("blog_keys", filters.keys)
    registry.add_filter("blog_field", filters.field)

    safe_logger(logger).log_info(
        "Collections configured",
        {"collections": list(registry.collections), "filters": list(registry.filters)},
    )
    return registry
