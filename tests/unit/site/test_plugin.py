#!/usr/bin/env python3
"""
Tests for plugin registration helpers and configure().
"""
import pytest
from datetime import date

from almanac.core.config import AlmanacOptions
from almanac.core.exceptions import ConfigurationError
from almanac.dataclasses.content_item import ContentCollection
from almanac.dataclasses.taxonomy import ByFunction
from almanac.site.plugin import (
    configure,
    generate_boolean_collection,
    generate_calendar,
    generate_paginated_blog,
    generate_taxonomy,
)
from almanac.site.registry import CollectionRegistry

STANDARD_COLLECTIONS = ["blog_flat", "all", "pages", "blog", "tag", "category", "calendar"]
STANDARD_FILTERS = [
    "blog_top",
    "blog_slug",
    "blog_dateformat",
    "blog_first",
    "blog_breadcrumbs",
    "blog_flatten",
    "blog_keys",
    "blog_field",
]


class TestConfigure:
    """Test configure()."""

    def test_registers_everything(self, options):
        registry = configure(CollectionRegistry(), options)
        assert list(registry.collections) == STANDARD_COLLECTIONS
        assert sorted(registry.filters) == sorted(STANDARD_FILTERS)

    def test_requires_options(self):
        with pytest.raises(ConfigurationError):
            configure(CollectionRegistry(), None)
        with pytest.raises(ConfigurationError):
            configure(CollectionRegistry(), {"items_per_page": 2})

    def test_twice_on_same_registry_rejected(self, options):
        registry = configure(CollectionRegistry(), options)
        with pytest.raises(ConfigurationError):
            configure(registry, options)

    def test_build(self, source, options):
        collections = configure(CollectionRegistry(), options).build(source)

        assert [i.url for i in collections["pages"]] == ["about"]
        assert [p.url for p in collections["blog"]] == ["blog", "blog/page-2", "blog/page-3"]
        assert [p.slug for p in collections["tag"]] == ["notes", "python", "travel"]
        assert [p.slug for p in collections["category"]] == ["essay", "thoughts"]
        assert len(collections["calendar"]) == 7
        assert len(collections["all"]) == 6
        assert len(collections["blog_flat"]) == 5

    def test_filters_bound(self, source, options):
        registry = configure(CollectionRegistry(), options)
        collections = registry.build(source)

        assert registry.filters["blog_slug"]("Book Reviews") == "book-reviews"
        assert registry.filters["blog_top"](collections["blog"], 1)[0].url == "posts/late-january"
        flat = registry.filters["blog_flatten"]([collections["blog_flat"], collections["all"]])
        assert len(flat) == 6
        assert registry.filters["blog_breadcrumbs"](collections, "posts/winter") == [
            "posts/winter",
            "blog/2023/01",
            "blog/2023",
        ]

    def test_breadcrumbs_follow_custom_blog_slug(self, source):
        options = AlmanacOptions(items_per_page=2, blog_slug="journal")
        registry = configure(CollectionRegistry(), options)
        collections = registry.build(source)

        trail = registry.filters["blog_breadcrumbs"](collections, "posts/new-year")
        assert trail == ["posts/new-year", "journal/2024/01", "journal/2024"]

    def test_options_isolated_between_registries(self, source):
        small = configure(CollectionRegistry(), AlmanacOptions(items_per_page=1)).build(source)
        large = configure(CollectionRegistry(), AlmanacOptions(items_per_page=10)).build(source)
        assert len(small["blog"]) == 5
        assert len(large["blog"]) == 1


class TestGenerators:
    """Test the individual registration helpers."""

    def test_generate_taxonomy_with_extractor(self, source, options):
        registry = CollectionRegistry()
        generate_taxonomy(
            registry, ByFunction(lambda item: str(item.date)[:4]), "year", options
        )
        pages = registry.build(source)["year"]
        assert [p.url for p in pages] == ["blog/year/2022", "blog/year/2023", "blog/year/2024"]

    def test_generate_boolean_collection_with_layout(self, make_item, options):
        featured = make_item("hit", date(2024, 1, 1), featured=True)
        registry = CollectionRegistry()
        generate_boolean_collection(registry, "featured", "featured", options, layout="feature.njk")

        built = registry.build(ContentCollection([featured, make_item("miss", date(2024, 1, 2))]))
        assert built["featured"] == [featured]
        assert featured.metadata["layout"] == "feature.njk"

    def test_generate_paginated_blog_and_calendar(self, source, options):
        registry = CollectionRegistry()
        generate_paginated_blog(registry, options)
        generate_calendar(registry, options)
        built = registry.build(source)
        assert built["blog"][0].url == "blog"
        assert built["calendar"][0].url == "blog/2022"

    @pytest.mark.parametrize(
        "register",
        [
            lambda r: generate_paginated_blog(r, None),
            lambda r: generate_calendar(r, "options"),
            lambda r: generate_taxonomy(r, "tags", "tag", None),
            lambda r: generate_boolean_collection(r, "pages", "page", None),
        ],
    )
    def test_missing_options_fail_fast(self, register):
        registry = CollectionRegistry()
        with pytest.raises(ConfigurationError):
            register(registry)
        assert registry.collections == {}
