"""rxnmatrix core package."""

from rxnmatrix.config import ParserSettings, ReactionConfig, load_config
from rxnmatrix.errors import (
    EquationError,
    InvalidCoefficientError,
    MalformedEquationError,
    RxnMatrixError,
    UnknownSpeciesError,
)
from rxnmatrix.matrix import assemble_matrix
from rxnmatrix.models import Reaction, SpeciesHandle, Term
from rxnmatrix.parsing import TermParser, split_equation
from rxnmatrix.reaction_set import ReactionSet
from rxnmatrix.registry import InternedSpeciesRegistry, SpeciesRegistry
from rxnmatrix.tokenizer import RegexTermTokenizer, TermTokenizer

__all__ = [
    "EquationError",
    "InternedSpeciesRegistry",
    "InvalidCoefficientError",
    "MalformedEquationError",
    "ParserSettings",
    "Reaction",
    "ReactionConfig",
    "ReactionSet",
    "RegexTermTokenizer",
    "RxnMatrixError",
    "SpeciesHandle",
    "SpeciesRegistry",
    "Term",
    "TermParser",
    "TermTokenizer",
    "UnknownSpeciesError",
    "assemble_matrix",
    "load_config",
    "split_equation",
]
