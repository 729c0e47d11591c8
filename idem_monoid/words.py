"""
Word and Alphabet Model

Words are plain immutable strings of single-character letters. The empty
string is the monoid identity and is displayed as IDENTITY_SYMBOL.
"""

from itertools import combinations
from typing import Dict, FrozenSet, Iterable, Mapping, Sequence, Tuple
from dataclasses import dataclass

from .constants import DEFAULT_SYMBOLS, IDENTITY_SYMBOL
from .errors import InvalidSymbolError


Word = str
IDENTITY: Word = ""


def content(word: Word) -> FrozenSet[str]:
    """Return the alphabet of a word (its set of distinct letters)."""
    return frozenset(word)


def relabel(word: Word, mapping: Mapping[str, str]) -> Word:
    """Substitute every letter of word through an explicit slot mapping."""
    return word.translate(str.maketrans(dict(mapping)))


def slot_mapping(letters: Sequence[str]) -> Dict[str, str]:
    """Map the first len(letters) default symbols onto the given letters."""
    return {DEFAULT_SYMBOLS[i]: letter for i, letter in enumerate(letters)}


def format_word(word: Word) -> str:
    return word if word else IDENTITY_SYMBOL


def sort_key(word: Word) -> Tuple[int, Word]:
    """Shortlex order: identity first, then by length, then lexicographic."""
    return (len(word), word)


@dataclass(frozen=True)
class Alphabet:
    """
    An ordered finite set of generator letters.

    Attributes:
        symbols: The letters, in their total order
    """
    symbols: Tuple[str, ...]

    def __post_init__(self):
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f"Duplicate symbols in alphabet {self.symbols}")
        for symbol in self.symbols:
            if len(symbol) != 1 or symbol == IDENTITY_SYMBOL:
                raise ValueError(f"Invalid alphabet symbol {symbol!r}")

    @classmethod
    def first(cls, n: int) -> "Alphabet":
        """The first n letters of the default ordering."""
        if n < 0 or n > len(DEFAULT_SYMBOLS):
            raise ValueError(f"Alphabet size {n} out of range [0, {len(DEFAULT_SYMBOLS)}]")
        return cls(tuple(DEFAULT_SYMBOLS[:n]))

    @classmethod
    def from_string(cls, symbols: str) -> "Alphabet":
        return cls(tuple(symbols))

    @classmethod
    def infer(cls, word: Word) -> "Alphabet":
        """Alphabet of a word, ordered by the default ordering where possible."""
        letters = content(word)
        rank = {s: i for i, s in enumerate(DEFAULT_SYMBOLS)}
        return cls(tuple(sorted(letters, key=lambda s: (rank.get(s, len(rank)), s))))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.symbols

    def __str__(self) -> str:
        return "".join(self.symbols)

    def validate(self, word: Word) -> Word:
        """Return word unchanged, or raise InvalidSymbolError."""
        for symbol in word:
            if symbol not in self.symbols:
                raise InvalidSymbolError(symbol, str(self))
        return word

    def parse(self, text: str) -> Word:
        """Parse user input; the identity symbol denotes the empty word."""
        text = text.strip()
        if text == IDENTITY_SYMBOL:
            return IDENTITY
        return self.validate(text)

    def subsets(self, size: int) -> Iterable[Tuple[str, ...]]:
        return combinations(self.symbols, size)
