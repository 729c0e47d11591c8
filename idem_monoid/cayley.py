"""
Cayley Table Module

Multiplication table of the free idempotent monoid on n letters. Elements
are indexed in shortlex order (identity first) and the table stores, for
every ordered pair (i, j), the index of the canonical form of the product.
"""

from __future__ import annotations
from typing import Dict, List, Optional
from dataclasses import dataclass, field
import logging

import numpy as np

from .canonical import normal_form
from .constants import MAX_TABLE_GENERATORS, PRODUCT_SIGN
from .errors import AlphabetTooLargeError
from .generator import MonoidGenerator
from .words import Word, format_word

_logger = logging.getLogger(__name__)

INDEX_DTYPE = np.int32


def concatenate(x: Word, y: Word) -> Word:
    """Product of two words before reduction, without a doubled junction letter."""
    if x and y and x[-1] == y[0]:
        return x + y[1:]
    return x + y


@dataclass
class CayleyTable:
    """
    Multiplication table of a finite monoid given by canonical words.

    Attributes:
        elements: Canonical words, in index order
        table: table[i, j] is the index of elements[i] * elements[j]
    """
    elements: List[Word]
    table: np.ndarray
    _index: Dict[Word, int] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if not self._index:
            self._index = {word: i for i, word in enumerate(self.elements)}

    @classmethod
    def build(cls, n: int, generator: Optional[MonoidGenerator] = None) -> CayleyTable:
        """
        Compute the full table for n generators.

        Args:
            n: Number of generators
            generator: Generator to draw elements from (default shares the store)

        Returns:
            CayleyTable over generate(n)
        """
        if n > MAX_TABLE_GENERATORS:
            raise AlphabetTooLargeError(n, MAX_TABLE_GENERATORS)
        generator = generator or MonoidGenerator()
        elements = generator.elements(n)
        index = {word: i for i, word in enumerate(elements)}

        size = len(elements)
        table = np.empty((size, size), dtype=INDEX_DTYPE)
        for i, x in enumerate(elements):
            for j, y in enumerate(elements):
                table[i, j] = index[normal_form(concatenate(x, y))]

        _logger.info("built %dx%d table for n=%d", size, size, n)
        return cls(elements, table, index)

    def __len__(self) -> int:
        return len(self.elements)

    def index_of(self, word: Word) -> int:
        """Index of the class of word; raises KeyError for foreign words."""
        return self._index[normal_form(word)]

    def multiply(self, x: Word, y: Word) -> Word:
        return self.elements[self.table[self.index_of(x), self.index_of(y)]]

    def identity_index(self) -> int:
        return self._index[""]

    def is_associative(self) -> bool:
        """Check (xy)z == x(yz) for every triple, vectorized over z."""
        t = self.table
        for i in range(len(self)):
            # Row i of (x_i y) z and x_i (y z) for all y, z
            left = t[t[i, :], :]
            right = t[i, :][t]
            if not np.array_equal(left, right):
                return False
        return True

    def idempotents(self) -> List[Word]:
        diagonal = self.table[np.arange(len(self)), np.arange(len(self))]
        return [self.elements[i] for i in np.flatnonzero(diagonal == np.arange(len(self)))]

    def lines(self) -> List[str]:
        """Render as `x * y = z`, one product per line."""
        out = []
        for i, x in enumerate(self.elements):
            for j, y in enumerate(self.elements):
                z = self.elements[self.table[i, j]]
                out.append(f"{format_word(x)}{PRODUCT_SIGN}{format_word(y)} = {format_word(z)}")
        return out
