"""
conftest.py
-----------
Shared pytest fixtures for Almanac tests.

Provides fixtures for:
- Content item factories
- A small blog with tags, categories, drafts and standalone pages
- Default build options
"""
import pytest
from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory

from almanac.core.config import AlmanacOptions
from almanac.dataclasses.content_item import ContentCollection, ContentItem


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Item Fixtures -----

@pytest.fixture
def make_item():
    """Factory for content items living at the content root."""
    def _make(url, when, input_path=None, **metadata):
        return ContentItem(
            url=url,
            date=when,
            metadata=metadata,
            input_path=input_path or f"./{url.strip('/').replace('/', '-') or 'index'}.md",
        )
    return _make


@pytest.fixture
def options():
    """Default options with a small page size."""
    return AlmanacOptions(items_per_page=2)


@pytest.fixture
def blog_items(make_item):
    """
    A small blog, in no particular order.

    - four published posts across 2023-01, 2023-02 and 2024-01
    - one draft
    - one standalone page flagged `page: true`
    """
    return [
        make_item("posts/winter", date(2023, 1, 15),
                  tags=["Python", "Notes"], categories=["essay"]),
        make_item("posts/spring", date(2023, 2, 1),
                  tags=["python", "Travel"]),
        make_item("posts/new-year", date(2024, 1, 1),
                  tags="Notes", categories=["thoughts"]),
        make_item("posts/late-january", date(2024, 1, 20),
                  tags=[], categories=["essay"]),
        make_item("posts/secret", date(2023, 3, 3),
                  tags=["Python", "Hidden"], draft=True),
        make_item("about", date(2022, 6, 1), page=True),
    ]


@pytest.fixture
def source(blog_items):
    """Content source over the small blog."""
    return ContentCollection(blog_items)
