#!/usr/bin/env python3
"""
cli.py
-------------------
Command-line interface for building and inspecting collections.

Commands:
    - build: Build every standard collection from a content manifest
    - breadcrumbs: Print the breadcrumb trail of a URL
    - slug: Print the slug of a label

Usage:
    almanac build site.yaml --config almanac.yaml --output report.yaml
    almanac breadcrumbs site.yaml blog/2024/01
    almanac slug "Book Reviews"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import click
import yaml

# --- Local imports ---
from almanac.builders.navigation import resolve_breadcrumbs
from almanac.core.cli import LOG_DIR, BuildStats, setup_logger
from almanac.core.config import AlmanacOptions
from almanac.core.logging_manager import AlmanacLogger, handle_cli_error
from almanac.dataclasses.content_item import ContentCollection
from almanac.dataclasses.page import Page
from almanac.site.manifest import load_manifest
from almanac.site.plugin import configure
from almanac.site.registry import CollectionRegistry
from almanac.utils.slugify import str_to_slug


def _load_options(config: Optional[str]) -> AlmanacOptions:
    return AlmanacOptions.from_yaml(Path(config)) if config else AlmanacOptions()


def _build_collections(
    manifest: str,
    options: AlmanacOptions,
    logger: AlmanacLogger,
) -> Dict[str, List[Any]]:
    """Load the manifest and run every standard collection."""
    registry = configure(CollectionRegistry(logger), options, logger)
    source = ContentCollection(load_manifest(Path(manifest)))
    return registry.build(source)


def _describe(entry: Any) -> Any:
    """Report form of a collection entry."""
    if isinstance(entry, Page):
        return {
            "url": entry.url,
            "title": entry.title,
            "pagenumber": entry.pagenumber,
            "total": entry.total,
            "count": entry.count,
            "items": [item.url for item in entry.items],
        }
    return entry.url


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Almanac Content Collections"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "almanac", verbose)


@cli.command()
@click.argument("manifest", type=click.Path())
@click.option("-c", "--config", type=click.Path(), help="YAML configuration file")
@click.option("-o", "--output", type=click.Path(), help="Write a YAML report of every collection")
@click.pass_context
def build(ctx: click.Context, manifest: str, config: Optional[str], output: Optional[str]) -> None:
    """Build every collection from a content manifest."""
    logger: AlmanacLogger = ctx.obj["logger"]
    stats = BuildStats()

    try:
        collections = _build_collections(manifest, _load_options(config), logger)
        for name, entries in collections.items():
            stats.record(name, entries)

        click.echo("✅ Collections built:")
        for name, size in stats.collections.items():
            click.echo(f"  {name}: {size}")
        click.echo(f"  {stats.summary()}")

        if output:
            report = {
                name: [_describe(entry) for entry in entries]
                for name, entries in collections.items()
            }
            Path(output).write_text(
                yaml.safe_dump(report, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
            click.echo(f"📝 Report written to {output}")

    except Exception as e:
        handle_cli_error(ctx, e, "build", {"manifest": manifest})


@cli.command()
@click.argument("manifest", type=click.Path())
@click.argument("url")
@click.option("-c", "--config", type=click.Path(), help="YAML configuration file")
@click.pass_context
def breadcrumbs(ctx: click.Context, manifest: str, url: str, config: Optional[str]) -> None:
    """Print the breadcrumb trail of URL."""
    logger: AlmanacLogger = ctx.obj["logger"]

    try:
        options = _load_options(config)
        collections = _build_collections(manifest, options, logger)
        trail = resolve_breadcrumbs(collections, url, logger, base=options.blog_slug)
        if not trail:
            click.echo(f"No breadcrumb available for {url}")
            return
        for crumb in trail:
            click.echo(crumb)

    except Exception as e:
        handle_cli_error(ctx, e, "breadcrumbs", {"manifest": manifest, "url": url})


@cli.command()
@click.argument("label")
def slug(label: str) -> None:
    """Print the slug of LABEL."""
    click.echo(str_to_slug(label))


if __name__ == "__main__":
    cli(obj={})
