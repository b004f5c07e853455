#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Almanac commands.

Functions:
    setup_logger: Initialize AlmanacLogger for CLI operations

Classes:
    BuildStats: Per-collection counts for a full site build

Usage:
    from almanac.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "build")
    stats = BuildStats()
    stats.record("blog", pages)
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Sequence

# --- Local imports ---
from almanac.core.logging_manager import AlmanacLogger


# Default log directory, relative to the working directory of the build
LOG_DIR = Path("logs")


def setup_logger(log_dir: Path, component: str, verbose: bool = False) -> AlmanacLogger:
    """
    Setup logging for CLI operations.

    Logs go under log_dir/operations; the console shows warnings only,
    or every record when verbose.

    Args:
        log_dir: Base log directory
        component: Component identifier for logging (e.g., 'build')
        verbose: Echo debug and info records to stderr

    Returns:
        Configured AlmanacLogger instance
    """
    return AlmanacLogger(log_dir / "operations", component, verbose=verbose)


@dataclass
class BuildStats:
    """
    Statistics for a full site build.

    Attributes:
        collections: Mapping of collection name to number of entries built
        start_time: Build start timestamp
    """
    collections: Dict[str, int] = field(default_factory=dict)
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def record(self, name: str, entries: Sequence) -> None:
        """Record the size of a built collection."""
        self.collections[name] = len(entries)

    def duration(self) -> float:
        """Get elapsed time in seconds (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        return (
            f"{len(self.collections)} collections, "
            f"{sum(self.collections.values())} entries "
            f"in {self.duration():.2f}s"
        )
