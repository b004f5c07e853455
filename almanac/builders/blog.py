#!/usr/bin/env python3
"""
blog.py
-------------------
Build the paginated blog feed.

Handles:
- Selecting published posts from the blog patterns
- Ordering the feed newest first
- Attaching sibling links, blog parent, layout and default category
- Paginating the feed under the blog root slug

Post metadata is annotated in place; templates rendering a post afterwards
read `siblings.previous`, `siblings.next` and `blog.parent` from it.
`blog.parent` is the zero-padded month slug ('YYYY/MM'), relative to the
blog root; resolve_breadcrumbs joins it to the root when it is not a URL
of its own.

Usage:
    builder = BlogBuilder(options, logger=logger)
    pages = builder.build(source)
    print(builder.stats.summary())
"""
from __future__ import annotations

from typing import List, Optional

from almanac.builders.base import BaseBuilder, BuilderStats
from almanac.builders.paginator import paginate
from almanac.core.config import AlmanacOptions
from almanac.core.logging_manager import AlmanacLogger
from almanac.dataclasses.content_item import ContentItem, ContentSource
from almanac.dataclasses.page import Page
from almanac.utils.dates import effective_date, year_month

BLOG_TITLE = "Blog"


class BlogStats(BuilderStats):
    """Track blog feed statistics."""

    def __init__(self) -> None:
        super().__init__()
        self.posts: int = 0
        self.pages: int = 0
        self.without_parent: List[str] = []

    def summary(self) -> str:
        return (
            f"{self.posts} posts, "
            f"{self.pages} pages, "
            f"{len(self.without_parent)} without calendar parent "
            f"in {self.duration():.2f}s"
        )


class BlogBuilder(BaseBuilder):
    """
    Blog feed builder.

    Attributes:
        options: Build configuration
        logger: Optional logger
        stats: Statistics of the last posts()/build() call
    """

    def __init__(
        self,
        options: AlmanacOptions,
        logger: Optional[AlmanacLogger] = None,
    ) -> None:
        super().__init__(options, logger)
        self.stats = BlogStats()

    def _annotate(self, post: ContentItem, index: int, feed: List[ContentItem]) -> None:
        """Write layout, category, parent and sibling links onto a post."""
        metadata = post.metadata

        if self.options.post_layout:
            metadata["layout"] = self.options.post_layout

        # An explicit empty list is the author's choice and is kept
        if self.options.default_category and "categories" not in metadata:
            metadata["categories"] = [self.options.default_category]

        parts = year_month(effective_date(post))
        if parts is not None:
            blog = metadata.get("blog")
            if not isinstance(blog, dict):
                blog = metadata["blog"] = {}
            blog["parent"] = f"{parts[0]}/{parts[1]}"
        else:
            self.stats.without_parent.append(post.url)
            self.log.log_warning(
                "Post date is not Y-M-D, no calendar parent",
                {"url": post.url, "date": effective_date(post)},
            )

        metadata["siblings"] = {
            "previous": feed[index - 1] if index > 0 else None,
            "next": feed[index + 1] if index + 1 < len(feed) else None,
        }

    def posts(self, source: ContentSource) -> List[ContentItem]:
        """
        Published posts, newest first, annotated in place.

        Args:
            source: Host content source

        Returns:
            Posts in feed order
        """
        self.stats = BlogStats()
        feed = list(reversed(self.published(source)))
        self.stats.items_selected = len(feed)

        for index, post in enumerate(feed):
            self._annotate(post, index, feed)

        self.stats.posts = len(feed)
        return feed

    def build(self, source: ContentSource) -> List[Page]:
        """
        Paginated blog feed.

        Args:
            source: Host content source

        Returns:
            Feed pages under the blog root slug
        """
        feed = self.posts(source)
        pages = paginate(
            feed,
            slug=self.options.blog_slug,
            prefix="",
            title=BLOG_TITLE,
            page_size=self.options.items_per_page,
        )
        self.stats.pages = len(pages)
        self.log.log_operation("build_blog", {"posts": len(feed), "pages": len(pages)})
        return pages
