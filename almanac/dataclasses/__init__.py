"""
Data structures for Almanac.

- ContentItem / ContentCollection: Host content and pattern selection
- Page / PageSlugs: Paginated output
- TaxonomyGroup / ByField / ByFunction: Grouping
"""

from almanac.dataclasses.content_item import ContentCollection, ContentItem, ContentSource
from almanac.dataclasses.page import Page, PageSlugs
from almanac.dataclasses.taxonomy import ByField, ByFunction, Extractor, TaxonomyGroup

__all__ = [
    "ByField",
    "ByFunction",
    "ContentCollection",
    "ContentItem",
    "ContentSource",
    "Extractor",
    "Page",
    "PageSlugs",
    "TaxonomyGroup",
]
