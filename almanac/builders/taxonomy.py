#!/usr/bin/env python3
"""
taxonomy.py
-----------
Build a paginated taxonomy (tags, categories, any metadata field).

Each distinct normalized value of the field becomes a group; each group
is paginated under `{blog_slug}/{taxonomy}`.

Usage:
    builder = TaxonomyBuilder(options, field="tags", taxonomy="tag")
    pages = builder.build(source)   # blog/tag/python, blog/tag/python/page-2, ...
"""
from __future__ import annotations

from typing import List, Optional

from almanac.builders.base import BaseBuilder, BuilderStats
from almanac.builders.groups import group_by
from almanac.builders.paginator import join_url, paginate_taxonomy
from almanac.core.config import AlmanacOptions
from almanac.core.logging_manager import AlmanacLogger
from almanac.dataclasses.content_item import ContentSource
from almanac.dataclasses.page import Page
from almanac.dataclasses.taxonomy import ByField, Extractor


class TaxonomyStats(BuilderStats):
    """Track taxonomy statistics."""

    def __init__(self) -> None:
        super().__init__()
        self.groups: int = 0
        self.pages: int = 0

    def summary(self) -> str:
        return (
            f"{self.items_selected} items, "
            f"{self.groups} groups, "
            f"{self.pages} pages in {self.duration():.2f}s"
        )


class TaxonomyBuilder(BaseBuilder):
    """
    Taxonomy builder.

    Attributes:
        field: Metadata field name, or an Extractor for computed values
        taxonomy: Taxonomy name used in the URL prefix
        default: Fallback label for items without a value
    """

    def __init__(
        self,
        options: AlmanacOptions,
        field: str | Extractor,
        taxonomy: str,
        logger: Optional[AlmanacLogger] = None,
    ) -> None:
        super().__init__(options, logger)
        if isinstance(field, str):
            self.extractor: Extractor = ByField(field)
            self.default = options.taxonomy_default(field)
        else:
            self.extractor = field
            self.default = None
        self.taxonomy = taxonomy
        self.stats = TaxonomyStats()

    @property
    def prefix(self) -> str:
        """URL prefix of this taxonomy's pages."""
        return join_url(self.options.blog_slug, self.taxonomy)

    def build(self, source: ContentSource) -> List[Page]:
        """
        Paginated taxonomy pages.

        Args:
            source: Host content source

        Returns:
            Pages of every group, groups in slug order
        """
        self.stats = TaxonomyStats()
        self.log.log_debug("Generating taxonomy", {"taxonomy": self.taxonomy})

        items = self.published(source)
        self.stats.items_selected = len(items)

        groups = group_by(items, self.extractor, self.default, self.logger)
        self.stats.groups = len(groups)

        pages = paginate_taxonomy(
            groups, self.prefix, self.options.items_per_page, self.logger
        )
        self.stats.pages = len(pages)
        return pages
