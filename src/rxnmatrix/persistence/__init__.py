"""Persistence helpers for rxnmatrix."""

from rxnmatrix.persistence.sqlite_store import (
    connect,
    create_project,
    ensure_schema,
    load_matrix,
    save_reaction_set,
)

__all__ = [
    "connect",
    "create_project",
    "ensure_schema",
    "load_matrix",
    "save_reaction_set",
]
