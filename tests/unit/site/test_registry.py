#!/usr/bin/env python3
"""
Tests for CollectionRegistry - registration, builds and Jinja2 install.
"""
import pytest
from jinja2 import Environment
from unittest.mock import MagicMock

from almanac.core.exceptions import CollectionBuildError, ConfigurationError
from almanac.core.logging_manager import AlmanacLogger
from almanac.site.registry import CollectionRegistry


class TestRegistration:
    """Test add_collection and add_filter."""

    def test_add_collection(self):
        registry = CollectionRegistry()
        registry.add_collection("blog", lambda source: [])
        assert list(registry.collections) == ["blog"]

    def test_duplicate_name_rejected(self):
        registry = CollectionRegistry()
        registry.add_collection("blog", lambda source: [])
        with pytest.raises(ConfigurationError, match="already registered"):
            registry.add_collection("blog", lambda source: [])

    def test_empty_name_rejected(self):
        with pytest.raises(ConfigurationError):
            CollectionRegistry().add_collection("", lambda source: [])
        with pytest.raises(ConfigurationError):
            CollectionRegistry().add_filter("", str)

    def test_filter_replaced(self):
        registry = CollectionRegistry()
        registry.add_filter("shout", str.upper)
        registry.add_filter("shout", str.lower)
        assert registry.filters["shout"] is str.lower


class TestBuild:
    """Test CollectionRegistry.build."""

    def test_builds_in_registration_order(self, source):
        calls = []
        registry = CollectionRegistry()
        registry.add_collection("second", lambda s: calls.append("second") or [1])
        registry.add_collection("first", lambda s: calls.append("first") or (2, 3))

        built = registry.build(source)
        assert calls == ["second", "first"]
        assert built == {"second": [1], "first": [2, 3]}

    def test_builder_receives_source(self, source):
        registry = CollectionRegistry()
        registry.add_collection("everything", lambda s: s.all())
        assert len(registry.build(source)["everything"]) == 6

    def test_failure_aborts_build(self, source):
        logger = MagicMock(spec=AlmanacLogger)
        registry = CollectionRegistry(logger)
        registry.add_collection("ok", lambda s: [])

        def broken(s):
            raise KeyError("date")

        registry.add_collection("broken", broken)

        with pytest.raises(CollectionBuildError) as excinfo:
            registry.build(source)
        assert excinfo.value.collection == "broken"
        assert isinstance(excinfo.value.__cause__, KeyError)
        logger.log_error.assert_called_once()
        logger.log_operation.assert_not_called()

    def test_logs_operation(self, source):
        logger = MagicMock(spec=AlmanacLogger)
        registry = CollectionRegistry(logger)
        registry.add_collection("one", lambda s: [1])
        registry.build(source)
        logger.log_operation.assert_called_once_with("build_collections", {"one": 1})


class TestInstall:
    """Test installing filters on a Jinja2 environment."""

    def test_filters_and_collections(self):
        registry = CollectionRegistry()
        registry.add_filter("shout", lambda value: value.upper())
        env = Environment()
        registry.install(env, {"blog": ["a", "b"]})

        template = env.from_string("{{ 'hi' | shout }} {{ collections.blog | length }}")
        assert template.render() == "HI 2"

    def test_without_collections(self):
        registry = CollectionRegistry()
        registry.add_filter("shout", lambda value: value.upper())
        env = Environment()
        registry.install(env)
        assert "collections" not in env.globals
        assert env.filters["shout"]("x") == "X"
