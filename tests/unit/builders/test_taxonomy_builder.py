#!/usr/bin/env python3
"""
Tests for TaxonomyBuilder - paginated tag and category groups.
"""
import pytest
from datetime import date

from almanac.builders.taxonomy import TaxonomyBuilder, TaxonomyStats
from almanac.core.config import AlmanacOptions
from almanac.dataclasses.content_item import ContentCollection
from almanac.dataclasses.taxonomy import ByField, ByFunction


class TestTaxonomyBuilder:
    """Test TaxonomyBuilder.build."""

    def test_tags(self, source, options):
        builder = TaxonomyBuilder(options, field="tags", taxonomy="tag")
        pages = builder.build(source)

        assert [p.url for p in pages] == [
            "blog/tag/notes",
            "blog/tag/python",
            "blog/tag/travel",
        ]
        assert [p.title for p in pages] == ["Notes", "Python", "Travel"]
        members = {p.slug: [i.url for i in p.items] for p in pages}
        assert members == {
            "notes": ["posts/winter", "posts/new-year"],
            "python": ["posts/winter", "posts/spring"],
            "travel": ["posts/spring"],
        }

    def test_drafts_never_grouped(self, source, options):
        pages = TaxonomyBuilder(options, field="tags", taxonomy="tag").build(source)
        assert "hidden" not in [p.slug for p in pages]
        assert all(i.url != "posts/secret" for p in pages for i in p.items)

    def test_categories(self, source, options):
        pages = TaxonomyBuilder(options, field="categories", taxonomy="category").build(source)
        assert [p.url for p in pages] == ["blog/category/essay", "blog/category/thoughts"]
        assert [i.url for i in pages[0].items] == ["posts/winter", "posts/late-january"]

    def test_default_category_groups_the_rest(self, source):
        options = AlmanacOptions(items_per_page=2, default_category="Misc")
        builder = TaxonomyBuilder(options, field="categories", taxonomy="category")
        pages = builder.build(source)

        misc = next(p for p in pages if p.slug == "misc")
        assert misc.title == "Misc"
        assert [i.url for i in misc.items] == ["about", "posts/spring"]

    def test_taxonomy_defaults_per_field(self, source):
        options = AlmanacOptions(items_per_page=2, taxonomy_defaults={"tags": "untagged"})
        pages = TaxonomyBuilder(options, field="tags", taxonomy="tag").build(source)
        untagged = next(p for p in pages if p.slug == "untagged")
        assert [i.url for i in untagged.items] == ["about", "posts/late-january"]

    def test_paginates_large_groups(self, make_item):
        options = AlmanacOptions(items_per_page=2)
        items = [make_item(f"p{day}", date(2024, 1, day), tags=["busy"]) for day in range(1, 6)]
        pages = TaxonomyBuilder(options, field="tags", taxonomy="tag").build(
            ContentCollection(items)
        )
        assert [p.url for p in pages] == [
            "blog/tag/busy",
            "blog/tag/busy/page-2",
            "blog/tag/busy/page-3",
        ]
        assert all(p.count == 5 for p in pages)

    def test_extractor(self, source, options):
        by_year = ByFunction(lambda item: str(item.date)[:4])
        pages = TaxonomyBuilder(options, field=by_year, taxonomy="year").build(source)
        assert [p.url for p in pages] == ["blog/year/2022", "blog/year/2023", "blog/year/2024"]

    def test_by_field_extractor_has_no_default(self, source):
        options = AlmanacOptions(items_per_page=2, default_category="Misc")
        builder = TaxonomyBuilder(options, field=ByField("categories"), taxonomy="category")
        assert builder.default is None

    def test_prefix_follows_blog_slug(self):
        options = AlmanacOptions(blog_slug="journal")
        builder = TaxonomyBuilder(options, field="tags", taxonomy="tag")
        assert builder.prefix == "journal/tag"

    def test_stats(self, source, options):
        builder = TaxonomyBuilder(options, field="tags", taxonomy="tag")
        builder.build(source)
        assert isinstance(builder.stats, TaxonomyStats)
        assert builder.stats.items_selected == 5
        assert builder.stats.groups == 3
        assert builder.stats.pages == 3
        assert "3 groups" in builder.stats.summary()
