"""Exception hierarchy for rxnmatrix."""

from __future__ import annotations


class RxnMatrixError(ValueError):
    """Base class for all rxnmatrix errors."""


class EquationError(RxnMatrixError):
    """Raised when an equation string cannot be parsed.

    Attributes:
        equation: The offending equation text, when known.
        index: Zero-based position of the equation in its reaction set, when known.
    """

    def __init__(self, message: str, equation: str | None = None, index: int | None = None) -> None:
        self.message = message
        self.equation = equation
        self.index = index
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.equation is None:
            return self.message
        if self.index is None:
            return f"{self.message} in equation {self.equation!r}"
        return f"{self.message} in equation {self.index} ({self.equation!r})"


class MalformedEquationError(EquationError):
    """Raised when an equation has no (or more than one) separator, or a term has no species."""


class InvalidCoefficientError(EquationError):
    """Raised when a coefficient token is not an unsigned real number."""

    def __init__(
        self,
        coefficient: str,
        species: str,
        equation: str | None = None,
        index: int | None = None,
    ) -> None:
        self.coefficient = coefficient
        self.species = species
        super().__init__(
            f"Invalid coefficient {coefficient!r} for species {species!r}",
            equation=equation,
            index=index,
        )


class UnknownSpeciesError(RxnMatrixError, KeyError):
    """Raised by a closed registry for a species name it does not know."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown species: {name!r}")

    def __str__(self) -> str:
        return self.args[0]
