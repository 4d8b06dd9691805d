"""SQLite persistence helpers for reaction sets."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

import numpy as np

from rxnmatrix.reaction_set import ReactionSet

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS project (
  id INTEGER PRIMARY KEY,
  name TEXT NOT NULL,
  created_utc TEXT,
  notes TEXT
);
CREATE TABLE IF NOT EXISTS species (
  id INTEGER PRIMARY KEY,
  project_id INTEGER,
  name TEXT,
  UNIQUE(project_id, name)
);
CREATE TABLE IF NOT EXISTS reaction_set (
  id INTEGER PRIMARY KEY,
  project_id INTEGER,
  comment TEXT,
  species JSON,
  created_utc TEXT
);
CREATE TABLE IF NOT EXISTS reaction (
  id INTEGER PRIMARY KEY,
  reaction_set_id INTEGER,
  position INTEGER,
  equation TEXT,
  stoich JSON
);
CREATE TABLE IF NOT EXISTS coefficient (
  reaction_set_id INTEGER,
  row_idx INTEGER,
  col_idx INTEGER,
  value REAL,
  PRIMARY KEY (reaction_set_id, row_idx, col_idx)
);
"""


def connect(project_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a project file."""
    path = Path(project_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.execute("PRAGMA foreign_keys = ON;")
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def create_project(
    connection: sqlite3.Connection,
    name: str,
    notes: str | None = None,
    created_utc: str | None = None,
) -> int:
    """Create a project entry and return its ID."""
    created_utc = created_utc or _utc_now()
    cursor = connection.execute(
        "INSERT INTO project (name, created_utc, notes) VALUES (?, ?, ?)",
        (name, created_utc, notes),
    )
    connection.commit()
    return int(cursor.lastrowid)


def save_reaction_set(
    connection: sqlite3.Connection,
    project_id: int,
    reaction_set: ReactionSet,
    created_utc: str | None = None,
) -> int:
    """Persist a reaction set with its species, reactions and matrix; return its ID.

    Every matrix cell is stored, including zeros and the sum column, so the
    matrix can be restored with :func:`load_matrix` without re-parsing.
    """
    created_utc = created_utc or _utc_now()
    species_names = reaction_set.species_names
    connection.executemany(
        "INSERT OR IGNORE INTO species (project_id, name) VALUES (?, ?)",
        [(project_id, name) for name in species_names],
    )
    cursor = connection.execute(
        "INSERT INTO reaction_set (project_id, comment, species, created_utc)"
        " VALUES (?, ?, ?, ?)",
        (project_id, reaction_set.comment, json.dumps(species_names), created_utc),
    )
    reaction_set_id = int(cursor.lastrowid)

    connection.executemany(
        "INSERT INTO reaction (reaction_set_id, position, equation, stoich)"
        " VALUES (?, ?, ?, ?)",
        [
            (
                reaction_set_id,
                position,
                reaction.name,
                _json_dumps(reaction.stoichiometry),
            )
            for position, reaction in enumerate(reaction_set.reactions())
        ],
    )

    matrix = reaction_set.matrix
    rows_list: list[tuple[object, ...]] = []
    for row in range(matrix.shape[0]):
        for col in range(matrix.shape[1]):
            rows_list.append((reaction_set_id, row, col, float(matrix[row, col])))
    connection.executemany(
        "INSERT INTO coefficient (reaction_set_id, row_idx, col_idx, value) VALUES (?, ?, ?, ?)",
        rows_list,
    )
    connection.commit()
    return reaction_set_id


def load_matrix(
    connection: sqlite3.Connection, reaction_set_id: int
) -> tuple[list[str], str, np.ndarray]:
    """Return ``(species_names, comment, matrix)`` of a stored reaction set.

    Raises:
        KeyError: If no reaction set has the given ID.
    """
    record = connection.execute(
        "SELECT comment, species FROM reaction_set WHERE id = ?", (reaction_set_id,)
    ).fetchone()
    if record is None:
        raise KeyError(reaction_set_id)
    comment, species_json = record
    species_names = json.loads(species_json)
    n_equations = connection.execute(
        "SELECT COUNT(*) FROM reaction WHERE reaction_set_id = ?", (reaction_set_id,)
    ).fetchone()[0]

    matrix = np.zeros((len(species_names), n_equations + 1), dtype=float)
    for row, col, value in connection.execute(
        "SELECT row_idx, col_idx, value FROM coefficient WHERE reaction_set_id = ?",
        (reaction_set_id,),
    ):
        matrix[row, col] = value
    return species_names, comment or "", matrix


def _json_dumps(payload: Mapping[str, object]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
