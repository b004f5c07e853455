#!/usr/bin/env python3
"""
config.py
---------
Build configuration for the collection builders.

AlmanacOptions is the single configuration value threaded into every
builder and registration call. There is no module-level "last used
options" record: callers always pass the options they mean.

Usage:
    from almanac.core.config import AlmanacOptions

    options = AlmanacOptions(items_per_page=5, post_layout="post.njk")
    options = AlmanacOptions.from_yaml(Path("almanac.yaml"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from almanac.core.exceptions import ConfigurationError


# ----- Defaults -----
TEMPLATE_EXTENSIONS: List[str] = [
    "html",
    "md",
    "11ty.js",
    "liquid",
    "njk",
    "hbs",
    "mustache",
    "ejs",
    "haml",
    "pug",
    "jstl",
]

DEFAULT_ITEMS_PER_PAGE = 10
DEFAULT_CONTENT = "."
DEFAULT_BLOG_SLUG = "blog"


@dataclass(frozen=True)
class AlmanacOptions:
    """
    Configuration for a site build.

    Attributes:
        content: Content root used to derive the default patterns
        extensions: Recognized template extensions
        blog_paths: Patterns selecting blog posts (default: content/*.ext)
        all_paths: Patterns selecting all content (default: content/**/*.ext)
        items_per_page: Page size for every paginated collection
        blog_slug: Root slug of the blog feed, taxonomies and calendar
        post_layout: Layout forced onto every blog post, if set
        default_category: Category assigned to posts without categories
        taxonomy_defaults: Per-field fallback value for taxonomy grouping
    """

    content:           str                = DEFAULT_CONTENT
    extensions:        List[str]          = field(default_factory=lambda: list(TEMPLATE_EXTENSIONS))
    blog_paths:        Optional[List[str]] = None
    all_paths:         Optional[List[str]] = None
    items_per_page:    int                = DEFAULT_ITEMS_PER_PAGE
    blog_slug:         str                = DEFAULT_BLOG_SLUG
    post_layout:       Optional[str]      = None
    default_category:  Optional[str]      = None
    taxonomy_defaults: Dict[str, str]     = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Fill derived patterns and validate."""
        content = self.content.rstrip("/") or "."
        if self.blog_paths is None:
            object.__setattr__(
                self, "blog_paths", [f"{content}/*.{ext}" for ext in self.extensions]
            )
        if self.all_paths is None:
            object.__setattr__(
                self, "all_paths", [f"{content}/**/*.{ext}" for ext in self.extensions]
            )
        self.validate()

    def validate(self) -> None:
        """
        Check the configuration is usable.

        Raises:
            ConfigurationError: If a pattern list is empty or blank, the page
                size is not a positive integer, or the blog slug is empty
        """
        for name in ("blog_paths", "all_paths"):
            patterns = getattr(self, name)
            if isinstance(patterns, str):
                raise ConfigurationError(f"{name} must be a list of patterns, not a string")
            if not patterns:
                raise ConfigurationError(f"{name} must not be empty")
            if any(not isinstance(p, str) or not p.strip() for p in patterns):
                raise ConfigurationError(f"{name} contains an empty pattern")

        if (
            isinstance(self.items_per_page, bool)
            or not isinstance(self.items_per_page, int)
            or self.items_per_page < 1
        ):
            raise ConfigurationError(
                f"items_per_page must be a positive integer, got {self.items_per_page!r}"
            )

        if not self.blog_slug or not self.blog_slug.strip("/"):
            raise ConfigurationError("blog_slug must not be empty")

    def taxonomy_default(self, field_name: str) -> Optional[str]:
        """
        Fallback value used when an item has no value for a taxonomy field.

        The configured default category doubles as the fallback for the
        `categories` field unless taxonomy_defaults overrides it.
        """
        if field_name in self.taxonomy_defaults:
            return self.taxonomy_defaults[field_name]
        if field_name == "categories":
            return self.default_category
        return None

    # ---- Constructors ----
    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "AlmanacOptions":
        """
        Build options from a plain mapping (e.g. parsed YAML).

        Args:
            data: Mapping of option names to values; None means defaults

        Returns:
            Validated AlmanacOptions

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        try:
            return cls(**dict(data))
        except TypeError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def from_yaml(cls, path: Path) -> "AlmanacOptions":
        """
        Load options from a YAML file.

        Args:
            path: YAML configuration file

        Returns:
            Validated AlmanacOptions

        Raises:
            ConfigurationError: If the file is missing, unparseable, or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}") from e

        return cls.from_mapping(data)
