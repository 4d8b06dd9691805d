"""Data structures for species handles, terms and reactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, eq=False)
class SpeciesHandle:
    """Opaque reference to one species registry entry.

    Handles compare and hash by identity, so two handles are equal only when
    they are the same registry entry, regardless of ``name``.
    """

    index: int
    name: str

    def __repr__(self) -> str:
        return f"SpeciesHandle({self.index}, {self.name!r})"


@dataclass(frozen=True)
class Term:
    coefficient: float
    species: SpeciesHandle


@dataclass(frozen=True)
class Reaction:
    name: str
    stoichiometry: Mapping[str, float]
