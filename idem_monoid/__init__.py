"""
idem_monoid - The Free Idempotent Monoid on Small Alphabets

Computes the finite set of classes of words under the rule xx = x, picks
the unique shortest word of every class, and reduces arbitrary words to it
with a replayable trace of square insertions and removals.
"""

__version__ = "0.1.0"

from .words import Alphabet, IDENTITY, content
from .decomposition import Decomposition, decompose
from .trimming import trim
from .rewrite import RewriteKind, RewriteStep, replay
from .canonical import CanonicalForm, canonicalize, equivalent, normal_form, reduce_word
from .generator import CanonicalStore, GeneratorConfig, MonoidGenerator, generate
from .cayley import CayleyTable
from .errors import (
    IdemMonoidError,
    InvalidSymbolError,
    AlphabetTooLargeError,
    PreconditionViolation,
    RewriteError,
    GenerationAborted,
)

__all__ = [
    "Alphabet",
    "IDENTITY",
    "content",
    "Decomposition",
    "decompose",
    "trim",
    "RewriteKind",
    "RewriteStep",
    "replay",
    "CanonicalForm",
    "canonicalize",
    "equivalent",
    "normal_form",
    "reduce_word",
    "CanonicalStore",
    "GeneratorConfig",
    "MonoidGenerator",
    "generate",
    "CayleyTable",
    "IdemMonoidError",
    "InvalidSymbolError",
    "AlphabetTooLargeError",
    "PreconditionViolation",
    "RewriteError",
    "GenerationAborted",
]
