"""Equation splitting and term parsing.

An equation is written ``<reactants> = <products>``; each side is a sequence
of terms separated by ``+``, each term an optional numeric coefficient
directly followed by a species token (``2B``, ``0.5 O2``, ``CH4``).

Reactant coefficients are stored negative and product coefficients positive.
"""

from __future__ import annotations

import math
import re

from rxnmatrix.errors import InvalidCoefficientError, MalformedEquationError
from rxnmatrix.models import SpeciesHandle, Term
from rxnmatrix.registry import SpeciesRegistry
from rxnmatrix.tokenizer import TermTokenizer

_NUMBER_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def split_equation(
    equation: str, separator: str = "=", *, index: int | None = None
) -> tuple[str, str]:
    """Split ``equation`` into its reactant and product sides.

    Raises:
        MalformedEquationError: If ``separator`` occurs zero or several times.
    """
    count = equation.count(separator)
    if count == 0:
        raise MalformedEquationError(f"Missing separator {separator!r}", equation, index)
    if count > 1:
        raise MalformedEquationError(
            f"Expected one separator {separator!r}, found {count}", equation, index
        )
    reactants, _, products = equation.partition(separator)
    return reactants.strip(), products.strip()


def parse_coefficient(
    text: str, species: str, *, equation: str | None = None, index: int | None = None
) -> float:
    """Return the magnitude written in ``text``; an empty string means 1."""
    if text == "":
        return 1.0
    if _NUMBER_RE.fullmatch(text) is None:
        raise InvalidCoefficientError(text, species, equation, index)
    value = float(text)
    if not math.isfinite(value):
        raise InvalidCoefficientError(text, species, equation, index)
    return value


class TermParser:
    """Turn equation sides into signed :class:`Term` lists.

    One parser serves one reaction set: ``species`` accumulates every handle
    in first-seen order (reactants before products, terms as written).
    """

    def __init__(self, tokenizer: TermTokenizer, registry: SpeciesRegistry) -> None:
        self.tokenizer = tokenizer
        self.registry = registry
        self.species: list[SpeciesHandle] = []
        self._seen: set[SpeciesHandle] = set()

    def parse_side(
        self,
        side: str,
        reactant: bool,
        terms: list[Term] | None = None,
        *,
        equation: str | None = None,
        index: int | None = None,
    ) -> list[Term]:
        """Append the terms of ``side`` to ``terms`` and return it."""
        if terms is None:
            terms = []
        sign = -1.0 if reactant else 1.0
        try:
            for coefficient_text, name in self.tokenizer.tokenize(side):
                magnitude = parse_coefficient(
                    coefficient_text, name, equation=equation, index=index
                )
                handle = self.registry.resolve(name)
                if handle not in self._seen:
                    self._seen.add(handle)
                    self.species.append(handle)
                terms.append(Term(sign * magnitude, handle))
        except MalformedEquationError as exc:
            if exc.equation is not None or equation is None:
                raise
            raise MalformedEquationError(exc.message, equation, index) from exc
        return terms

    def parse_equation(
        self, equation: str, separator: str = "=", *, index: int | None = None
    ) -> list[Term]:
        """Parse both sides of one equation into a single term list."""
        reactants, products = split_equation(equation, separator, index=index)
        terms: list[Term] = []
        self.parse_side(reactants, True, terms, equation=equation, index=index)
        self.parse_side(products, False, terms, equation=equation, index=index)
        return terms


__all__ = [
    "TermParser",
    "parse_coefficient",
    "split_equation",
]
