#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Almanac project.

This module defines the exceptions raised while configuring and building
content collections.

Exception Hierarchy:
    Exception (built-in)
    ├── ConfigurationError - Invalid or ambiguous build configuration
    ├── CollectionBuildError - A registered collection builder failed
    ├── ManifestError - Content manifest could not be loaded
    ├── CalendarSlugError - Calendar slug did not match YYYY-MM-DD
    └── FlattenError - Malformed input to the dedup/flatten step

Usage:
    from almanac.core.exceptions import ConfigurationError

    try:
        options = AlmanacOptions.from_yaml(path)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
"""


class ConfigurationError(Exception):
    """
    Exception for invalid build configuration.

    Raised at registration time, before any collection is built, when the
    configuration would leave the content set ambiguous:
    - Empty content pattern lists
    - Non-positive items per page
    - Empty blog root slug
    - Unknown configuration keys
    - Duplicate collection names

    Examples:
        >>> raise ConfigurationError("blog_paths must not be empty")
        >>> raise ConfigurationError("Collection 'blog' is already registered")
    """

    pass


class CollectionBuildError(Exception):
    """
    Exception for a collection builder that failed during a build.

    The whole build is aborted; no partially built collection is returned.

    Attributes:
        collection: Name of the collection whose builder failed

    Examples:
        >>> raise CollectionBuildError("calendar", "unexpected None date")
    """

    def __init__(self, collection: str, message: str) -> None:
        self.collection = collection
        super().__init__(f"Collection '{collection}' failed: {message}")


class ManifestError(Exception):
    """
    Exception for content manifest loading failures.

    Raised when the YAML manifest handed to the CLI cannot be used:
    - File not found or unreadable
    - YAML syntax errors
    - Items missing a url

    Examples:
        >>> raise ManifestError("Manifest item 3 has no url")
    """

    pass


class CalendarSlugError(ValueError):
    """
    Exception for a calendar slug that does not start with YYYY-MM-DD.

    Raised internally by the calendar builder and caught per slug: the
    affected items are left out of the calendar and the skip is recorded.

    Attributes:
        slug: The offending slug
    """

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Calendar slug does not match YYYY-MM-DD: {slug!r}")


class FlattenError(TypeError):
    """
    Exception for malformed input to the dedup/flatten step.

    Raised when a member of the outer list is not iterable or an entry has
    no url. Caught by flatten_unique, which logs it and returns None.
    """

    pass
