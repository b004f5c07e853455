#!/usr/bin/env python3
"""
registry.py
-----------
Named collections and template filters exposed to the host.

The host registers collection builders and filters once, then calls
build() for each site build. Filters are installed on a Jinja2
environment the same way the template layer registers its own.

Usage:
    registry = CollectionRegistry()
    configure(registry, AlmanacOptions())
    collections = registry.build(ContentCollection(items))

    env = Environment()
    registry.install(env, collections)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Callable, Dict, List, Optional

# --- Third-party imports ---
from jinja2 import Environment

# --- Local imports ---
from almanac.core.exceptions import CollectionBuildError, ConfigurationError
from almanac.core.logging_manager import AlmanacLogger, safe_logger
from almanac.dataclasses.content_item import ContentSource

CollectionBuilder = Callable[[ContentSource], List[Any]]


class CollectionRegistry:
    """
    Registry of collection builders and filters.

    Attributes:
        collections: Builders by collection name, in registration order
        filters: Filter functions by name
        logger: Optional logger
    """

    def __init__(self, logger: Optional[AlmanacLogger] = None) -> None:
        self.collections: Dict[str, CollectionBuilder] = {}
        self.filters: Dict[str, Callable[..., Any]] = {}
        self.logger = logger

    def add_collection(self, name: str, builder: CollectionBuilder) -> None:
        """
        Register a collection builder.

        Raises:
            ConfigurationError: If the name is empty or already registered
        """
        if not name:
            raise ConfigurationError("Collection name must not be empty")
        if name in self.collections:
            raise ConfigurationError(f"Collection '{name}' is already registered")
        self.collections[name] = builder
        safe_logger(self.logger).log_debug("Collection registered", {"name": name})

    def add_filter(self, name: str, fn: Callable[..., Any]) -> None:
        """Register (or replace) a template filter."""
        if not name:
            raise ConfigurationError("Filter name must not be empty")
        self.filters[name] = fn

    def build(self, source: ContentSource) -> Dict[str, List[Any]]:
        """
        Run every registered builder against the source.

        Args:
            source: Host content source

        Returns:
            Built collections by name

        Raises:
            CollectionBuildError: If any builder fails; nothing is returned
        """
        log = safe_logger(self.logger)
        built: Dict[str, List[Any]] = {}

        for name, builder in self.collections.items():
            try:
                built[name] = list(builder(source))
            except CollectionBuildError:
                raise
            except Exception as e:
                log.log_error(e, {"collection": name})
                raise CollectionBuildError(name, str(e)) from e
            log.log_debug("Collection built", {"name": name, "entries": len(built[name])})

        log.log_operation(
            "build_collections",
            {name: len(entries) for name, entries in built.items()},
        )
        return built

    def install(
        self,
        env: Environment,
        collections: Optional[Dict[str, List[Any]]] = None,
    ) -> None:
        """
        Register filters (and built collections, if given) on a Jinja2 environment.

        Args:
            env: Jinja2 Environment instance
            collections: Built collections exposed as the `collections` global
        """
        for name, fn in self.filters.items():
            env.filters[name] = fn
        if collections is not None:
            env.globals["collections"] = collections
