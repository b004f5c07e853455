#!/usr/bin/env python3
"""
base.py
-------------------
Base classes for collection builders.

Provides:
- BuilderStats: Abstract base class for tracking build statistics
- BaseBuilder: Abstract base class for builder implementations

Every builder receives its AlmanacOptions explicitly and an optional
logger; a fresh stats object is created on each build() call.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional

from almanac.core.config import AlmanacOptions
from almanac.core.logging_manager import AlmanacLogger, safe_logger
from almanac.dataclasses.content_item import ContentItem, ContentSource


class BuilderStats(ABC):
    """
    Abstract base class for tracking builder statistics.

    Attributes:
        start_time: Timestamp when processing started
        items_selected: Number of items the builder started from
    """

    def __init__(self) -> None:
        self.start_time: datetime = datetime.now()
        self.items_selected: int = 0

    def duration(self) -> float:
        """Elapsed time since initialization, in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    @abstractmethod
    def summary(self) -> str:
        """Human-readable summary of build statistics."""
        pass


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Attributes:
        options: Build configuration
        logger: Optional logger for operation tracking
    """

    def __init__(
        self,
        options: AlmanacOptions,
        logger: Optional[AlmanacLogger] = None,
    ) -> None:
        self.options = options
        self.logger = logger

    @property
    def log(self) -> AlmanacLogger:
        """Logger that is always safe to call."""
        return safe_logger(self.logger)

    def published(self, source: ContentSource) -> List[ContentItem]:
        """Blog items in host order, drafts removed."""
        return [
            item
            for item in source.select_by_pattern(self.options.blog_paths)
            if not item.is_draft
        ]

    @abstractmethod
    def build(self, source: ContentSource) -> List[Any]:
        """
        Build the collection from a content source.

        Note:
            Subclasses must implement this with their specific logic
        """
        pass
