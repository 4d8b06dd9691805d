"""Command-line entrypoints for rxnmatrix."""

from __future__ import annotations

import json
import logging
from contextlib import closing
from pathlib import Path
from typing import Annotated, List

import typer

from rxnmatrix.config import ParserSettings, load_config
from rxnmatrix.persistence import sqlite_store
from rxnmatrix.reaction_set import ReactionSet

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _emit(reaction_set: ReactionSet, output: Path | None, project_file: Path | None) -> None:
    payload = reaction_set.to_dict()

    if project_file is not None:
        with closing(sqlite_store.connect(project_file)) as connection:
            sqlite_store.ensure_schema(connection)
            project_id = sqlite_store.create_project(
                connection,
                name=reaction_set.comment or "rxnmatrix",
                notes="Autogenerated from rxnmatrix CLI.",
            )
            payload["reaction_set_id"] = sqlite_store.save_reaction_set(
                connection, project_id=project_id, reaction_set=reaction_set
            )
        logger.info("Saved reaction set to %s", project_file)

    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def parse(
    equations: Annotated[
        List[str], typer.Argument(help="Equations such as 'A + 2B = 3C'.")
    ],
    comment: Annotated[str, typer.Option(help="Free-text note stored with the set.")] = "",
    separator: Annotated[
        str, typer.Option(help="Token between reactants and products.")
    ] = "=",
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    project_file: Annotated[
        Path | None,
        typer.Option(help="Optional SQLite project file to persist the matrix."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    """Build the coefficient matrix of the given equations."""
    _configure_logging(verbose)
    try:
        reaction_set = ReactionSet(
            equations, comment, settings=ParserSettings(separator=separator)
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _emit(reaction_set, output, project_file)


@app.command()
def run(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON configuration file.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    project_file: Annotated[
        Path | None,
        typer.Option(help="Optional SQLite project file to persist the matrix."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    """Build the coefficient matrix described by a config file."""
    _configure_logging(verbose)
    try:
        reaction_set = load_config(config_file).build()
    except (OSError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _emit(reaction_set, output, project_file)
