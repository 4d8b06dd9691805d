"""Assembly of the species-by-equation coefficient matrix."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from rxnmatrix.models import SpeciesHandle, Term


def assemble_matrix(
    term_lists: Sequence[Sequence[Term]],
    species: Sequence[SpeciesHandle],
) -> np.ndarray:
    """Build the coefficient matrix for a set of parsed equations.

    The result has one row per entry of ``species`` (same order) and
    ``len(term_lists) + 1`` columns. Column ``j`` holds the coefficients of
    equation ``j``; repeated species within an equation are summed. The last
    column holds the sum of each row's equation columns.

    Args:
        term_lists: Signed terms of each equation, reactants before products.
        species: Every handle referenced by ``term_lists``, without duplicates.

    Returns:
        A float64 array of shape ``(len(species), len(term_lists) + 1)``.
    """
    n_equations = len(term_lists)
    row_of = {handle: row for row, handle in enumerate(species)}
    matrix = np.zeros((len(species), n_equations + 1), dtype=float)

    for column, terms in enumerate(term_lists):
        for term in terms:
            matrix[row_of[term.species], column] += term.coefficient

    # left-to-right row sum
    for column in range(n_equations):
        matrix[:, n_equations] += matrix[:, column]
    return matrix


def split_matrix(matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(coefficients, net)``: the equation columns and the sum column."""
    return matrix[:, :-1], matrix[:, -1]
