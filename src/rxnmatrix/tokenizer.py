"""Tokenizers that split one side of an equation into coefficient/species pairs."""

from __future__ import annotations

import re
from typing import Iterator, Protocol

from rxnmatrix.errors import MalformedEquationError

# Everything before the species token is coefficient text; species tokens
# start with an uppercase letter or an opening bracket ("H2O", "(CH3)2O", "[Fe]").
_TERM_RE = re.compile(r"^\s*(?P<coefficient>[^A-Z(\[]*?)\s*(?P<species>[A-Z(\[].*?)\s*$")


class TermTokenizer(Protocol):
    def tokenize(self, side: str) -> Iterator[tuple[str, str]]:
        """Yield ``(coefficient_text, species_name)`` pairs for one equation side."""
        ...


class RegexTermTokenizer:
    """Split a side on ``term_separator`` and each term into coefficient and species.

    Pairs are produced lazily; each call to :meth:`tokenize` starts over.
    Blank terms (``"A + + B"``, an empty side) are skipped.
    """

    def __init__(self, term_separator: str = "+") -> None:
        if not term_separator:
            raise ValueError("term_separator must be a non-empty string")
        self.term_separator = term_separator

    def tokenize(self, side: str) -> Iterator[tuple[str, str]]:
        for raw in side.split(self.term_separator):
            term = raw.strip()
            if not term:
                continue
            match = _TERM_RE.match(term)
            if match is None:
                raise MalformedEquationError(f"Term {term!r} has no species")
            yield match.group("coefficient"), match.group("species")
