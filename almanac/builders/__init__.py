"""
Builders package for Almanac.

Provides the collection builders and the algorithms they share:
- group_by: Group items by normalized field values
- paginate / paginate_taxonomy: Pagination with navigation slugs
- BlogBuilder: Feed with sibling links
- TaxonomyBuilder: Paginated tags, categories, or any field
- CalendarBuilder: Year/month hierarchy
- filter_by_flag: Boolean-flag collections
- flatten_unique / resolve_breadcrumbs: Cross-collection navigation

All builders follow the common interface defined by the base classes.
"""

from almanac.builders.base import BaseBuilder, BuilderStats
from almanac.builders.blog import BlogBuilder, BlogStats
from almanac.builders.calendar import CalendarBuilder, CalendarStats
from almanac.builders.collections import filter_by_flag, select_content
from almanac.builders.groups import group_by
from almanac.builders.navigation import flatten_unique, resolve_breadcrumbs
from almanac.builders.paginator import paginate, paginate_taxonomy
from almanac.builders.taxonomy import TaxonomyBuilder, TaxonomyStats

__all__ = [
    # Base classes
    "BaseBuilder",
    "BuilderStats",
    # Algorithms
    "group_by",
    "paginate",
    "paginate_taxonomy",
    "flatten_unique",
    "resolve_breadcrumbs",
    # Collection builders
    "BlogBuilder",
    "BlogStats",
    "CalendarBuilder",
    "CalendarStats",
    "TaxonomyBuilder",
    "TaxonomyStats",
    "filter_by_flag",
    "select_content",
]
