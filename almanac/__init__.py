"""
Almanac
=======

Content taxonomy and pagination for static site builds.

Given content items that a site generator has already loaded (url, date,
metadata), Almanac derives the navigable views a blog needs and hands each
back as a named, paginated sequence.

Main Components:
    - builders: Grouping, pagination, blog feed, calendar, navigation
    - dataclasses: ContentItem, Page, TaxonomyGroup
    - site: Collection registry, template filters, manifest loader, CLI
    - core: Configuration, logging, exceptions
    - utils: Slug and date helpers

Example Usage:
    >>> from almanac import AlmanacOptions, CollectionRegistry, ContentCollection, configure
    >>> registry = configure(CollectionRegistry(), AlmanacOptions(items_per_page=5))
    >>> collections = registry.build(ContentCollection(items))
    >>> collections["tag"][0].url
    'blog/tag/python'
"""

__version__ = "1.0.0"

from almanac.core.config import AlmanacOptions
from almanac.dataclasses.content_item import ContentCollection, ContentItem
from almanac.dataclasses.page import Page
from almanac.dataclasses.taxonomy import ByField, ByFunction, TaxonomyGroup
from almanac.site.plugin import configure
from almanac.site.registry import CollectionRegistry

__all__ = [
    "AlmanacOptions",
    "ByField",
    "ByFunction",
    "CollectionRegistry",
    "ContentCollection",
    "ContentItem",
    "Page",
    "TaxonomyGroup",
    "configure",
]
