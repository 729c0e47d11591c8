"""
Decomposition Engine

Splits a word w with at least two distinct letters into the tuple
(p, a, mid, b, q):

    p  longest prefix of w whose alphabet is Alphabet(w) minus one letter
    a  the letter following p (its first occurrence in w)
    b  the letter preceding q (its last occurrence in w)
    q  longest suffix of w whose alphabet is Alphabet(w) minus one letter

When p·a and b·q do not overlap, w == p + a + mid + b + q. When they
overlap, mid is empty and `overlap` holds the number of shared characters.
"""

from dataclasses import dataclass

from .errors import PreconditionViolation
from .words import Word, content


@dataclass(frozen=True)
class Decomposition:
    """The (p, a, b, q) structure of a word, plus its middle remainder."""
    p: Word
    a: str
    mid: Word
    b: str
    q: Word
    overlap: int = 0

    @property
    def head(self) -> Word:
        """Shortest prefix carrying the full alphabet."""
        return self.p + self.a

    @property
    def tail(self) -> Word:
        """Shortest suffix carrying the full alphabet."""
        return self.b + self.q

    def word(self) -> Word:
        """Reassemble the decomposed word."""
        if self.overlap:
            return self.head + self.tail[self.overlap:]
        return self.head + self.mid + self.tail

    def key(self):
        return (self.p, self.a, self.b, self.q)


def _split_point(word: Word, size: int) -> int:
    """Index of the letter whose first occurrence completes the alphabet."""
    seen = set()
    for i, letter in enumerate(word):
        if letter not in seen:
            seen.add(letter)
            if len(seen) == size:
                return i
    raise PreconditionViolation(f"Alphabet of {word!r} has fewer than {size} letters")


def decompose(word: Word) -> Decomposition:
    """
    Decompose a word with |Alphabet(word)| >= 2.

    Args:
        word: The word to split

    Returns:
        Decomposition covering every character of word exactly once
    """
    size = len(content(word))
    if size < 2:
        raise PreconditionViolation(
            f"decompose needs at least 2 distinct letters, got {size} in {word!r}"
        )

    i = _split_point(word, size)
    j = len(word) - 1 - _split_point(word[::-1], size)

    p, a = word[:i], word[i]
    b, q = word[j], word[j + 1:]

    if i < j:
        return Decomposition(p, a, word[i + 1:j], b, q)
    # The head and tail share the characters word[j..i]
    return Decomposition(p, a, "", b, q, overlap=i - j + 1)
