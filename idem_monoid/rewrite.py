"""
Rewrite Trace Module

Elementary rewrite steps of the free idempotent monoid and the derivation
lemmas used to build replayable traces.

A step either inserts a square (x -> xx) or removes one (xx -> x) at a
given position. Steps are data: they can be applied, inverted, shifted
into a larger context and rendered.

Derivation lemmas (both directions are available through invert_trace):

    absorb(x, v):     x v x  ->  x        when Alphabet(v) ⊆ Alphabet(x)
    excise(y, m, z):  y m z  ->  y z      when Alphabet(y) = Alphabet(z) ⊇ Alphabet(m)
"""

from enum import Enum
from typing import Iterable, List, Sequence
from dataclasses import dataclass

from .constants import TRACE_ARROW
from .errors import PreconditionViolation, RewriteError
from .words import Word, content


class RewriteKind(Enum):
    """The two elementary moves."""
    INSERT_SQUARE = "insert"
    REMOVE_SQUARE = "remove"


@dataclass(frozen=True)
class RewriteStep:
    """
    One elementary rewrite.

    Attributes:
        kind: Whether the square is inserted or removed
        position: Index in the word where the affected substring starts
        root: The word x of the square xx
    """
    kind: RewriteKind
    position: int
    root: Word

    def __post_init__(self):
        if not self.root:
            raise PreconditionViolation("Rewrite root must be non-empty")
        if self.position < 0:
            raise PreconditionViolation(f"Negative rewrite position {self.position}")

    @classmethod
    def insert(cls, position: int, root: Word) -> "RewriteStep":
        return cls(RewriteKind.INSERT_SQUARE, position, root)

    @classmethod
    def remove(cls, position: int, root: Word) -> "RewriteStep":
        return cls(RewriteKind.REMOVE_SQUARE, position, root)

    @property
    def before(self) -> Word:
        """Substring being rewritten."""
        if self.kind is RewriteKind.REMOVE_SQUARE:
            return self.root * 2
        return self.root

    @property
    def after(self) -> Word:
        """Substring it becomes."""
        if self.kind is RewriteKind.REMOVE_SQUARE:
            return self.root
        return self.root * 2

    def apply(self, word: Word) -> Word:
        """Apply the step, checking that it is legal on word."""
        end = self.position + len(self.before)
        if word[self.position:end] != self.before:
            raise RewriteError(
                f"{self.kind.value} of {self.root!r} does not apply to "
                f"{word!r} at position {self.position}"
            )
        return word[:self.position] + self.after + word[end:]

    def inverted(self) -> "RewriteStep":
        kind = (RewriteKind.INSERT_SQUARE if self.kind is RewriteKind.REMOVE_SQUARE
                else RewriteKind.REMOVE_SQUARE)
        return RewriteStep(kind, self.position, self.root)

    def shifted(self, offset: int) -> "RewriteStep":
        return RewriteStep(self.kind, self.position + offset, self.root)

    def render(self, word: Word) -> str:
        """Show the step as `ab(abab)c -> ab(ab)c`."""
        end = self.position + len(self.before)
        left, right = word[:self.position], word[end:]
        return f"{left}({self.before}){right}{TRACE_ARROW}{left}({self.after}){right}"


def replay(word: Word, steps: Iterable[RewriteStep]) -> Word:
    """Apply steps in order."""
    for step in steps:
        word = step.apply(word)
    return word


def invert_trace(steps: Sequence[RewriteStep]) -> List[RewriteStep]:
    """A trace taking the result of steps back to their starting word."""
    return [step.inverted() for step in reversed(steps)]


def shift_trace(steps: Iterable[RewriteStep], offset: int) -> List[RewriteStep]:
    return [step.shifted(offset) for step in steps]


def render_trace(word: Word, steps: Iterable[RewriteStep]) -> List[str]:
    """One display line per step, replaying from word."""
    lines = []
    for step in steps:
        lines.append(step.render(word))
        word = step.apply(word)
    return lines


# =============================================================================
# Derivation lemmas
# =============================================================================

def absorb(x: Word, v: Word) -> List[RewriteStep]:
    """
    Steps turning `x v x` into `x`, for Alphabet(v) ⊆ Alphabet(x).

    With v = c v' and x = t1 c t2 (last occurrence of c):
        x c v' x  ->  x c v' x c t2     square (c t2) inserted in the last x
                  ->  x c t2            absorb(x c, v')
                  ->  x                 square (c t2) removed

    The nesting is unrolled: all insertions, then x' x' -> x' for the
    grown x', then the removals innermost first.
    """
    if not x:
        raise PreconditionViolation("Cannot absorb into the empty word")
    if not content(v) <= content(x):
        raise PreconditionViolation(f"Alphabet of {v!r} is not inside that of {x!r}")

    inserts: List[RewriteStep] = []
    removes: List[RewriteStep] = []
    for n, c in enumerate(v):
        i = x.rindex(c)
        root = x[i:]
        inserts.append(RewriteStep.insert(len(x) + len(v) - n + i, root))
        removes.append(RewriteStep.remove(i, root))
        x += c

    return inserts + [RewriteStep.remove(0, x)] + removes[::-1]


def excise(y: Word, m: Word, z: Word) -> List[RewriteStep]:
    """
    Steps turning `y m z` into `y z`, for Alphabet(y) = Alphabet(z) ⊇ Alphabet(m).

        y m z  ->  y m z y z     z grown into z y z
               ->  y z           absorb(y, m z)
    """
    if not m:
        return []
    if content(y) != content(z) or not content(m) <= content(y):
        raise PreconditionViolation(
            f"Cannot excise {m!r} between {y!r} and {z!r}"
        )
    steps = shift_trace(invert_trace(absorb(z, y)), len(y) + len(m))
    steps.extend(absorb(y, m + z))
    return steps
