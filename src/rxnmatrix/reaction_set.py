"""Reaction sets: parsed equations sharing one species index and coefficient matrix.

A :class:`ReactionSet` is built in one go from one or many equation strings.
Parsing is fail-fast: the first equation that cannot be split or tokenized
raises, and no partially built object is returned.

Example:
    >>> rs = ReactionSet(["A = B", "B = C"])
    >>> rs.species_names
    ['A', 'B', 'C']
    >>> rs.matrix.tolist()
    [[-1.0, 0.0, -1.0], [1.0, -1.0, 0.0], [0.0, 1.0, 1.0]]
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

from rxnmatrix.config import ParserSettings
from rxnmatrix.matrix import assemble_matrix, split_matrix
from rxnmatrix.models import Reaction, SpeciesHandle, Term
from rxnmatrix.parsing import TermParser
from rxnmatrix.registry import InternedSpeciesRegistry, SpeciesRegistry
from rxnmatrix.tokenizer import RegexTermTokenizer, TermTokenizer

logger = logging.getLogger(__name__)


class ReactionSet:
    """One or more chemical equations and their stoichiometric coefficient matrix.

    Args:
        equations: A single equation string or an ordered iterable of them.
        comment: Free-text note stored with the set.
        registry: Resolves species names to handles. A private
            :class:`InternedSpeciesRegistry` is created when omitted.
        tokenizer: Splits equation sides into coefficient/species pairs.
            Defaults to :class:`RegexTermTokenizer` using ``settings.term_separator``.
        settings: Separators; defaults to ``=`` and ``+``.

    Raises:
        MalformedEquationError: An equation has no single separator or a term has no species.
        InvalidCoefficientError: A coefficient is not an unsigned real number.
    """

    def __init__(
        self,
        equations: str | Iterable[str],
        comment: str = "",
        *,
        registry: SpeciesRegistry | None = None,
        tokenizer: TermTokenizer | None = None,
        settings: ParserSettings | None = None,
    ) -> None:
        if isinstance(equations, str):
            equations = [equations]
        equations = tuple(equations)
        settings = settings or ParserSettings()
        registry = registry if registry is not None else InternedSpeciesRegistry()
        tokenizer = tokenizer or RegexTermTokenizer(settings.term_separator)

        parser = TermParser(tokenizer, registry)
        term_lists: list[list[Term]] = []
        for index, equation in enumerate(equations):
            terms = parser.parse_equation(equation, settings.separator, index=index)
            logger.debug("Parsed equation %d %r into %d terms", index, equation, len(terms))
            term_lists.append(terms)

        matrix = assemble_matrix(term_lists, parser.species)
        matrix.setflags(write=False)

        self._equations = equations
        self._comment = comment or ""
        self._species = tuple(parser.species)
        self._matrix = matrix
        logger.debug("Assembled coefficient matrix of shape %s", matrix.shape)

    @property
    def comment(self) -> str:
        return self._comment

    @property
    def equations(self) -> tuple[str, ...]:
        return self._equations

    @property
    def species(self) -> tuple[SpeciesHandle, ...]:
        """Species handles in first-seen order; row ``i`` of :attr:`matrix` is ``species[i]``."""
        return self._species

    @property
    def species_names(self) -> list[str]:
        return [handle.name for handle in self._species]

    @property
    def matrix(self) -> np.ndarray:
        """Read-only ``(n_species, n_equations + 1)`` array; the last column is the row sum."""
        return self._matrix

    @property
    def coefficients(self) -> np.ndarray:
        return split_matrix(self._matrix)[0]

    @property
    def net_coefficients(self) -> np.ndarray:
        return split_matrix(self._matrix)[1]

    def get_comment(self) -> str:
        return self.comment

    def get_species(self) -> tuple[SpeciesHandle, ...]:
        return self.species

    def get_matrix(self) -> np.ndarray:
        return self.matrix

    def coefficient(self, species: str | SpeciesHandle, equation_index: int) -> float:
        """Return the coefficient of ``species`` (name or handle) in one equation.

        Species that do not take part in the set raise ``KeyError``.
        """
        if not 0 <= equation_index < len(self._equations):
            raise IndexError(f"equation index {equation_index} out of range")
        return float(self._matrix[self._row(species), equation_index])

    def _row(self, species: str | SpeciesHandle) -> int:
        for row, handle in enumerate(self._species):
            if handle == species or (isinstance(species, str) and handle.name == species.strip()):
                return row
        raise KeyError(species)

    def reactions(self) -> list[Reaction]:
        """Return one :class:`Reaction` per equation with its non-zero coefficients."""
        reactions = []
        for column, equation in enumerate(self._equations):
            stoichiometry = {
                handle.name: float(self._matrix[row, column])
                for row, handle in enumerate(self._species)
                if self._matrix[row, column] != 0.0
            }
            reactions.append(Reaction(name=equation.strip(), stoichiometry=stoichiometry))
        return reactions

    def to_dict(self) -> dict[str, Any]:
        return {
            "comment": self._comment,
            "equations": list(self._equations),
            "species": self.species_names,
            "matrix": self._matrix.tolist(),
        }

    def __len__(self) -> int:
        return len(self._equations)

    def __repr__(self) -> str:
        return (
            f"ReactionSet(equations={len(self._equations)}, "
            f"species={self.species_names!r}, comment={self._comment!r})"
        )
