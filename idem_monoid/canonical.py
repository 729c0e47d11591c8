"""
Canonicalizer

Normalizes a word to the unique shortest word of its class in the free
idempotent monoid, optionally with a replayable trace of square insertions
and removals.

Normal form of w with |Alphabet(w)| >= 2:
    (p, a, b, q) = decompose(w)
    nf(w) = trim(nf(p), a, b, nf(q))

Trace of w -> nf(w):
    w                   ->  w w                 square insertion
    p a ... | ... b q   ->  P a ... | ... b Q   traces of p and q in place
    P a m b Q           ->  P a b Q             excise(P a, m, b Q)
    P a b Q             ->  nf(w)               junction square removed
"""

import logging
from functools import lru_cache
from typing import List, Optional, Tuple
from dataclasses import dataclass

from .decomposition import decompose
from .constants import IDENTITY_SYMBOL
from .errors import PreconditionViolation
from .rewrite import RewriteStep, excise, render_trace, replay, shift_trace
from .trimming import junction_overlap, trim
from .words import IDENTITY, Alphabet, Word, content, format_word

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanonicalForm:
    """
    Result of canonicalization.

    Attributes:
        source: The word that was reduced
        word: Its canonical representative
        trace: Rewrite steps taking source to word (empty if not requested)
    """
    source: Word
    word: Word
    trace: Tuple[RewriteStep, ...] = ()

    def __str__(self) -> str:
        return format_word(self.word)

    @property
    def c(self) -> Word:
        return self.word

    def lines(self) -> List[str]:
        """Trace rendered one step per line."""
        return render_trace(self.source, self.trace)

    def replay(self) -> Word:
        return replay(self.source, self.trace)


@lru_cache(maxsize=1 << 16)
def normal_form(word: Word) -> Word:
    """Canonical representative of word, without a trace."""
    size = len(content(word))
    if size == 0:
        return IDENTITY
    if size == 1:
        return word[0]

    d = decompose(word)
    p, q = normal_form(d.p), normal_form(d.q)
    candidate = trim(p, d.a, d.b, q)

    if decompose(candidate).key() != (p, d.a, d.b, q):
        _logger.warning("trimmed %r to %r without reaching a fixpoint", word, candidate)
        if len(candidate) >= len(word):
            raise PreconditionViolation(f"No reduction of {word!r} at the junction")
        return normal_form(candidate)
    return candidate


def is_canonical(word: Word) -> bool:
    return normal_form(word) == word


def equivalent(u: Word, v: Word) -> bool:
    """Whether u and v lie in the same class."""
    return content(u) == content(v) and normal_form(u) == normal_form(v)


def _derive(word: Word) -> Tuple[Word, List[RewriteStep]]:
    size = len(content(word))
    if size == 0:
        return IDENTITY, []
    if size == 1:
        letter = word[0]
        return letter, [RewriteStep.remove(0, letter) for _ in range(len(word) - 1)]

    if is_canonical(word):
        return word, []

    d = decompose(word)
    steps = [RewriteStep.insert(0, word)]

    p, p_steps = _derive(d.p)
    steps.extend(p_steps)

    q, q_steps = _derive(d.q)
    second_copy = len(p) + 2 * len(word) - len(d.p)
    steps.extend(shift_trace(q_steps, second_copy - len(d.q)))

    head, tail = p + d.a, d.b + q
    middle = word[len(d.p) + 1:] + word[:len(word) - len(d.q) - 1]
    steps.extend(excise(head, middle, tail))

    k = junction_overlap(head, tail)
    if k:
        steps.append(RewriteStep.remove(len(head) - k, tail[:k]))

    return head + tail[k:], steps


def canonicalize(word: Word, alphabet: Optional[Alphabet] = None,
                 with_trace: bool = True) -> CanonicalForm:
    """
    Reduce word to its canonical representative.

    Args:
        word: Word to reduce
        alphabet: If given, every letter of word must belong to it
        with_trace: Whether to derive the rewrite trace

    Returns:
        CanonicalForm holding the representative and the trace
    """
    if alphabet is not None:
        alphabet.validate(word)

    if not with_trace:
        return CanonicalForm(word, normal_form(word))

    result, steps = _derive(word)
    _logger.debug("reduced %r to %r in %d steps", word, result, len(steps))
    return CanonicalForm(word, result, tuple(steps))


def reduce_word(text: str, alphabet: Optional[Alphabet] = None,
                with_trace: bool = True) -> CanonicalForm:
    """Parse user input (the identity symbol is the empty word) and reduce it."""
    if alphabet is None:
        alphabet = Alphabet.infer(text.strip().replace(IDENTITY_SYMBOL, ""))
    return canonicalize(alphabet.parse(text), alphabet, with_trace)
