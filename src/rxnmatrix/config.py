"""Parser settings and JSON configuration files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class ParserSettings:
    """Separators used when reading equations.

    Attributes:
        separator: Token between the reactant and product sides.
        term_separator: Token between terms on one side.
    """

    separator: str = "="
    term_separator: str = "+"

    def __post_init__(self) -> None:
        if not self.separator or not self.term_separator:
            raise ValueError("separators must be non-empty strings")
        if self.separator == self.term_separator:
            raise ValueError("separator and term_separator must differ")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParserSettings":
        defaults = cls()
        return cls(
            separator=str(data.get("separator", defaults.separator)),
            term_separator=str(data.get("term_separator", defaults.term_separator)),
        )


@dataclass(frozen=True)
class ReactionConfig:
    equations: Sequence[str]
    comment: str = ""
    settings: ParserSettings = field(default_factory=ParserSettings)
    species: Sequence[str] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReactionConfig":
        if not isinstance(data, Mapping):
            raise ValueError("configuration must be a JSON object")
        if "equations" not in data:
            raise ValueError("configuration has no 'equations' entry")
        equations = data["equations"]
        if isinstance(equations, str):
            equations = [equations]
        species = data.get("species")
        parser = data.get("parser", {})
        if not isinstance(equations, list):
            raise ValueError("'equations' must be a string or a list of strings")
        if species is not None and not isinstance(species, list):
            raise ValueError("'species' must be a list of names")
        if not isinstance(parser, Mapping):
            raise ValueError("'parser' must be a JSON object")
        return cls(
            equations=[str(eqn) for eqn in equations],
            comment=str(data.get("comment", "")),
            settings=ParserSettings.from_mapping(parser),
            species=None if species is None else [str(name) for name in species],
        )

    def build(self):
        """Parse the configured equations into a :class:`ReactionSet`.

        A ``species`` list closes the registry: any other name raises
        :class:`~rxnmatrix.errors.UnknownSpeciesError`.
        """
        # local import to avoid circular import
        from rxnmatrix.reaction_set import ReactionSet
        from rxnmatrix.registry import InternedSpeciesRegistry

        registry = None
        if self.species is not None:
            registry = InternedSpeciesRegistry(self.species, allow_new=False)
        return ReactionSet(
            list(self.equations),
            self.comment,
            registry=registry,
            settings=self.settings,
        )


def load_config(config_file: str | Path) -> ReactionConfig:
    """Read a JSON configuration file."""
    with open(config_file, "r") as f:
        data = json.load(f)
    return ReactionConfig.from_mapping(data)
