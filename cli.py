#!/usr/bin/env python3
"""
Exercise Catalog CLI.

Command-line interface for ExerciseDB queries:
- search: Search exercises by name
- body-part / equipment / target: List exercises by filter
- by-id: Fetch one exercise
- reference: Print the static body part / equipment vocabularies
- serve: Run the browser proxy locally

Usage:
    python cli.py search "bench press" --limit 5
    python cli.py body-part chest --catalog
    python cli.py by-id 0001 --raw
    python cli.py serve --port 8080
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, List

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click

from exercise_catalog.catalog import build_orchestrator
from exercise_catalog.errors import CatalogError
from exercise_catalog.mapper import to_catalog_record
from exercise_catalog.media import with_media
from exercise_catalog.models import CanonicalExercise
from exercise_catalog.normalizer import normalize_many, normalize_single
from exercise_catalog.query import (
    ACTION_BODY_PART,
    ACTION_BY_ID,
    ACTION_EQUIPMENT,
    ACTION_SEARCH,
    ACTION_TARGET,
    CatalogQuery,
)
from exercise_catalog.reference import body_parts, equipment_list


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _echo_exercises(exercises: List[CanonicalExercise], catalog: bool) -> None:
    if catalog:
        _echo_json([to_catalog_record(ex).to_row() for ex in exercises])
        return

    if not exercises:
        click.echo("No exercises found.")
        return

    for ex in exercises:
        media = with_media(ex).media
        body_part = ex.primary_body_part or "-"
        equipment = ex.primary_equipment or "-"
        click.echo(f"{ex.id or '-':<12} {ex.name:<40} {body_part:<12} {equipment}")
        if media and media.display_url:
            click.echo(f"{'':<12} {media.display_url}")


def _run_query(query: CatalogQuery, raw: bool, catalog: bool, verbose: bool) -> None:
    _configure_logging(verbose)

    try:
        result = build_orchestrator().execute(query)
    except CatalogError as e:
        raise click.ClickException(str(e))

    if verbose:
        click.echo(f"Provider: {result.provider}", err=True)
        if result.primary_error:
            click.echo(f"Primary failed: {result.primary_error}", err=True)

    if raw:
        _echo_json(result.data)
        return

    if query.returns_list:
        exercises = normalize_many(result.data)
    else:
        single = normalize_single(result.data)
        exercises = [single] if single else []
    _echo_exercises(exercises, catalog)


def _build_query(action: str, value: str, limit: int = 20) -> CatalogQuery:
    try:
        return CatalogQuery(action, value, limit)
    except CatalogError as e:
        raise click.BadParameter(str(e))


output_options = [
    click.option("--raw", is_flag=True, help="Print the provider's raw JSON"),
    click.option("--catalog", is_flag=True, help="Print exercise_definitions rows"),
    click.option("--verbose", "-v", is_flag=True, help="Verbose output"),
]


def with_output_options(func):
    for option in reversed(output_options):
        func = option(func)
    return func


@click.group()
def cli():
    """Exercise Catalog CLI - ExerciseDB queries with provider failover."""
    pass


# =============================================================================
# QUERIES
# =============================================================================

@cli.command("search")
@click.argument("query")
@click.option("--limit", default=20, type=int, help="Maximum results (default: 20)")
@with_output_options
def search(query: str, limit: int, raw: bool, catalog: bool, verbose: bool):
    """Search exercises by name."""
    _run_query(_build_query(ACTION_SEARCH, query, limit), raw, catalog, verbose)


@cli.command("body-part")
@click.argument("part")
@click.option("--limit", default=20, type=int, help="Maximum results (default: 20)")
@with_output_options
def body_part(part: str, limit: int, raw: bool, catalog: bool, verbose: bool):
    """List exercises for a body part (e.g., CHEST)."""
    _run_query(_build_query(ACTION_BODY_PART, part, limit), raw, catalog, verbose)


@cli.command("equipment")
@click.argument("equipment")
@click.option("--limit", default=20, type=int, help="Maximum results (default: 20)")
@with_output_options
def equipment(equipment: str, limit: int, raw: bool, catalog: bool, verbose: bool):
    """List exercises for a piece of equipment (e.g., DUMBBELL)."""
    _run_query(_build_query(ACTION_EQUIPMENT, equipment, limit), raw, catalog, verbose)


@cli.command("target")
@click.argument("target")
@click.option("--limit", default=20, type=int, help="Maximum results (default: 20)")
@with_output_options
def target(target: str, limit: int, raw: bool, catalog: bool, verbose: bool):
    """List exercises for a target muscle (e.g., pectorals)."""
    _run_query(_build_query(ACTION_TARGET, target, limit), raw, catalog, verbose)


@cli.command("by-id")
@click.argument("exercise_id")
@with_output_options
def by_id(exercise_id: str, raw: bool, catalog: bool, verbose: bool):
    """Fetch one exercise by provider id."""
    _run_query(_build_query(ACTION_BY_ID, exercise_id), raw, catalog, verbose)


# =============================================================================
# REFERENCE DATA
# =============================================================================

@cli.command("reference")
@click.argument("kind", type=click.Choice(["body-parts", "equipment"]))
def reference(kind: str):
    """Print a static vocabulary (no network call)."""
    values = body_parts() if kind == "body-parts" else equipment_list()
    for value in values:
        click.echo(value)


# =============================================================================
# PROXY SERVER
# =============================================================================

@cli.command("serve")
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", default=8080, type=int, help="Port (default: 8080)")
@click.option("--debug", is_flag=True, help="Flask debug mode")
def serve(host: str, port: int, debug: bool):
    """Run the browser proxy locally."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    from exercise_catalog.server import create_app

    try:
        app = create_app()
    except CatalogError as e:
        raise click.ClickException(str(e))
    click.echo(f"Serving exercise catalog proxy on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    cli()
