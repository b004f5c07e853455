#!/usr/bin/env python3
"""
Tests for Page and PageSlugs.
"""
import pytest

from almanac.dataclasses.page import Page, PageSlugs


@pytest.fixture
def page():
    return Page(
        title="January 2024",
        slug="2024/01",
        url="blog/2024/01",
        pagenumber=0,
        count=3,
        total=1,
        slugs=PageSlugs(all=["2024/01"], next=None, previous=None,
                        first="2024/01", last="2024/01"),
        items=["a", "b", "c"],
        children=["a", "b", "c"],
        meta={"type": "month", "shortTitle": "January"},
    )


class TestPage:
    """Test Page attribute access and serialization."""

    def test_meta_readable_as_attribute(self, page):
        assert page.type == "month"
        assert page.shortTitle == "January"

    def test_missing_attribute_raises(self, page):
        with pytest.raises(AttributeError):
            page.not_there

    def test_fields_win_over_meta(self):
        page = Page(
            title="T", slug="s", url="u", pagenumber=0, count=0, total=0,
            slugs=PageSlugs(all=[], next=None, previous=None, first=None, last=None),
            meta={"title": "shadow"},
        )
        assert page.title == "T"

    def test_to_dict_merges_meta(self, page):
        data = page.to_dict()
        assert data["type"] == "month"
        assert data["url"] == "blog/2024/01"
        assert data["slugs"] == {
            "all": ["2024/01"],
            "next": None,
            "previous": None,
            "first": "2024/01",
            "last": "2024/01",
        }
        assert data["items"] == ["a", "b", "c"]

    def test_repr(self, page):
        assert repr(page) == "Page(url='blog/2024/01', pagenumber=0)"
