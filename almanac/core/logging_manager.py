#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for collection builds and the almanac command line.

Builders never hold a bare logger: they call safe_logger(logger), so a
build without a log directory costs nothing. AlmanacLogger writes:
- <component>.log: operations, info, debug and warnings (rotating)
- errors.log: errors with their structured context and traceback
- stderr: warnings, or everything when the CLI runs verbose

Almanac exceptions carry the fields a reader of the logs needs (the
calendar slug that was skipped, the collection whose builder failed).
error_context() pulls them out, so builders, the registry and the CLI
all report them the same way.

Usage:
    logger = AlmanacLogger(Path("logs/operations"), "almanac")
    safe_logger(logger).log_operation("build_blog", {"posts": 12})
    safe_logger(None).log_info("nothing happens")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

# --- Local imports ---
from almanac.core.exceptions import (
    CalendarSlugError,
    CollectionBuildError,
    ConfigurationError,
    ManifestError,
)

MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Anything not listed exits with 1
EXIT_CODES = {
    ConfigurationError: 2,
    ManifestError: 2,
    CollectionBuildError: 3,
}


def format_details(message: str, details: Optional[Dict[str, Any]] = None) -> str:
    """Message followed by its details as JSON, if any."""
    if not details:
        return message
    return f"{message}: {json.dumps(details, default=str)}"


def error_context(error: Exception) -> Dict[str, Any]:
    """
    Structured fields of an exception.

    Examples:
        >>> error_context(CalendarSlugError("sometime"))
        {'error': 'CalendarSlugError', 'slug': 'sometime'}
    """
    context: Dict[str, Any] = {"error": type(error).__name__}
    if isinstance(error, CalendarSlugError):
        context["slug"] = error.slug
    if isinstance(error, CollectionBuildError):
        context["collection"] = error.collection
    if error.__cause__ is not None:
        context["cause"] = f"{type(error.__cause__).__name__}: {error.__cause__}"
    return context


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """
    One-line CLI message for an error, with its traceback when asked.

    Examples:
        >>> format_cli_error(ConfigurationError("blog_paths must not be empty"))
        '❌ ConfigurationError: blog_paths must not be empty'
    """
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback and error.__traceback__ is not None:
        message += "\n\n" + "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return message


def exit_code_for(error: Exception) -> int:
    """CLI exit code for an error type."""
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


class AlmanacLogger:
    """
    File and console logger for one almanac component.

    Attributes:
        log_dir: Directory for log files
        component: Component name, used for the log file and logger names
        logger: Operations logger (component log file and console)
        error_logger: Error logger (errors.log)
    """

    def __init__(
        self,
        log_dir: Path,
        component: str = "almanac",
        verbose: bool = False,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files, created if missing
            component: Component name (e.g. 'almanac', 'calendar')
            verbose: Echo debug and info records to stderr as well
        """
        self.log_dir = Path(log_dir)
        self.component = component
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._file_logger(
            f"{component}.operations", logging.DEBUG, self.log_dir / f"{component}.log"
        )
        self.error_logger = self._file_logger(
            f"{component}.errors", logging.ERROR, self.log_dir / "errors.log"
        )

        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG if verbose else logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.logger.addHandler(console)

    @staticmethod
    def _file_logger(name: str, level: int, path: Path) -> logging.Logger:
        """Named logger writing to one rotating file; earlier handlers dropped."""
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        logger.handlers = []

        handler = RotatingFileHandler(
            path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log a completed build step (collection built, pages created)."""
        self.logger.info(format_details(f"OPERATION {operation}", details))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.logger.debug(format_details(message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.logger.info(format_details(message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.logger.warning(format_details(message, details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error with its structured fields and traceback.

        Args:
            error: Exception that occurred
            context: Caller context merged over the error's own fields
        """
        fields = error_context(error)
        fields.update(context or {})
        self.error_logger.error(format_details(f"{fields.pop('error')}: {error}", fields))

        if error.__traceback__ is not None:
            self.error_logger.error(
                "".join(traceback.format_exception(type(error), error, error.__traceback__))
            )

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Log an error and return its CLI message."""
        self.log_error(error, context)
        return format_cli_error(error, show_traceback)


class NullLogger:
    """
    Logger that discards everything; what safe_logger(None) returns.

    log_cli_error still formats the message, so CLI error reporting works
    without a log directory.
    """

    def _discard(self, *args: Any, **kwargs: Any) -> None:
        return None

    log_operation = log_debug = log_info = log_warning = log_error = _discard

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[AlmanacLogger]) -> AlmanacLogger:
    """The given logger, or the shared NullLogger for None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Report a failed CLI command and exit.

    Logs the error with the operation and extra context, prints the
    one-line message (with traceback when verbose) to stderr, and exits
    with the code for the error type (see EXIT_CODES).

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    context = {"operation": operation}
    context.update(additional_context or {})

    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code_for(error))
