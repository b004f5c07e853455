#!/usr/bin/env python3
"""
calendar.py
-------------------
Build the year/month calendar of blog posts.

Posts are grouped by effective date, then folded into two levels:
- Year nodes:  slug 'YYYY',    title 'YYYY',         meta type 'year'
- Month nodes: slug 'YYYY/MM', title 'January YYYY', meta type 'month'

A year node holds every post of its months. A month node's posts are also
its children, so the first page of a month can list them inline, and its
`blog.parent` meta points at the year page URL for breadcrumb walks.
Nodes are sorted by slug; years and months are zero-padded whatever the
padding of the source date, so lexical order is chronological
('2023' < '2023/01' < '2023/02' < '2024').

Date slugs that do not start with Y-M-D are logged and recorded in
`stats.skipped`; the rest of the calendar is still built.

Usage:
    builder = CalendarBuilder(options, logger=logger)
    pages = builder.build(source)
    for slug, urls in builder.stats.skipped:
        ...
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from almanac.builders.base import BaseBuilder, BuilderStats
from almanac.builders.groups import group_by
from almanac.builders.paginator import join_url, paginate_taxonomy
from almanac.core.config import AlmanacOptions
from almanac.core.exceptions import CalendarSlugError
from almanac.core.logging_manager import AlmanacLogger, error_context
from almanac.dataclasses.content_item import ContentSource
from almanac.dataclasses.page import Page
from almanac.dataclasses.taxonomy import ByFunction, TaxonomyGroup
from almanac.utils.dates import effective_date, month_name, year_month

YEAR = "year"
MONTH = "month"


class CalendarStats(BuilderStats):
    """
    Track calendar statistics.

    Attributes:
        years: Number of year nodes
        months: Number of month nodes
        pages: Number of pages created
        skipped: (slug, item urls) for every date slug left out
    """

    def __init__(self) -> None:
        super().__init__()
        self.years: int = 0
        self.months: int = 0
        self.pages: int = 0
        self.skipped: List[Tuple[str, List[str]]] = []

    @property
    def items_skipped(self) -> int:
        return sum(len(urls) for _, urls in self.skipped)

    def summary(self) -> str:
        return (
            f"{self.years} years, "
            f"{self.months} months, "
            f"{self.pages} pages, "
            f"{len(self.skipped)} skipped in {self.duration():.2f}s"
        )


def parse_date_slug(slug: str) -> Tuple[str, str]:
    """
    Zero-padded year and month of a calendar date slug.

    Raises:
        CalendarSlugError: If the slug does not start with Y-M-D or the
            month is not 1..12
    """
    parts = year_month(slug)
    if parts is None:
        raise CalendarSlugError(slug)
    return parts


class CalendarBuilder(BaseBuilder):
    """
    Calendar builder.

    Attributes:
        options: Build configuration
        logger: Optional logger
        stats: Statistics of the last build() call
    """

    def __init__(
        self,
        options: AlmanacOptions,
        logger: Optional[AlmanacLogger] = None,
    ) -> None:
        super().__init__(options, logger)
        self.stats = CalendarStats()

    def nodes(self, source: ContentSource) -> List[TaxonomyGroup]:
        """
        Year and month nodes, sorted by slug.

        Args:
            source: Host content source

        Returns:
            Calendar nodes
        """
        self.stats = CalendarStats()
        items = self.published(source)
        self.stats.items_selected = len(items)

        by_date = group_by(items, ByFunction(effective_date), logger=self.logger)
        buckets: Dict[str, TaxonomyGroup] = {}

        for group in by_date:
            try:
                year, month = parse_date_slug(group.slug)
            except CalendarSlugError as e:
                urls = [item.url for item in group.items]
                self.stats.skipped.append((group.slug, urls))
                self.log.log_warning("Calendar slug skipped", {**error_context(e), "urls": urls})
                continue

            year_node = buckets.get(year)
            if year_node is None:
                year_node = buckets[year] = TaxonomyGroup(
                    slug=year,
                    title=year,
                    meta={"type": YEAR, "year": year},
                )
                self.stats.years += 1
            year_node.items.extend(group.items)

            month_slug = f"{year}/{month}"
            month_node = buckets.get(month_slug)
            if month_node is None:
                name = month_name(month)
                month_node = buckets[month_slug] = TaxonomyGroup(
                    slug=month_slug,
                    title=f"{name} {year}",
                    meta={
                        "type": MONTH,
                        "year": year,
                        "month": month,
                        "shortTitle": name,
                        "blog": {"parent": join_url(self.options.blog_slug, year)},
                    },
                )
                # Same list object: the month's posts are its children
                month_node.children = month_node.items
                self.stats.months += 1
            month_node.items.extend(group.items)

        return sorted(buckets.values(), key=lambda node: node.slug)

    def build(self, source: ContentSource) -> List[Page]:
        """
        Paginated calendar pages under the blog root slug.

        Args:
            source: Host content source

        Returns:
            Pages of every calendar node, in slug order
        """
        nodes = self.nodes(source)
        pages = paginate_taxonomy(
            nodes, self.options.blog_slug, self.options.items_per_page, self.logger
        )
        self.stats.pages = len(pages)

        if self.stats.skipped:
            self.log.log_warning(
                "Calendar entries skipped",
                {"slugs": len(self.stats.skipped), "items": self.stats.items_skipped},
            )
        return pages
