"""
Monoid Generator

Builds the complete set of canonical words of the free idempotent monoid on
n letters, bottom-up by alphabet size.

Every canonical word with alphabet exactly S (|S| = k >= 2) is
trim(p, a, b, q) for a, b in S, p canonical over S - {a} and q canonical
over S - {b}; distinct tuples give distinct classes. The words for size k
are memoized once over the slot letters a, b, c, ... and relabeled onto any
concrete subset of that size.

Usage:
    gen = MonoidGenerator(GeneratorConfig(parallel=True))
    elements = gen.generate(3)      # 160 words, "" is the identity
"""

from __future__ import annotations
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Tuple
from dataclasses import dataclass, field
from concurrent.futures import ThreadPoolExecutor
from itertools import product
import logging
import threading
import time

from .constants import DEFAULT_SYMBOLS, DEFAULT_WORKERS, MAX_GENERATORS
from .errors import AlphabetTooLargeError, GenerationAborted, PreconditionViolation
from .trimming import trim
from .words import IDENTITY, Alphabet, Word, relabel, slot_mapping, sort_key

_logger = logging.getLogger(__name__)


# =============================================================================
# SECTION 1: Configuration
# =============================================================================

@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for monoid generation."""
    max_generators: int = MAX_GENERATORS    # Refuse larger n up front

    # Parallel processing
    parallel: bool = False                  # Combine letter pairs on threads
    max_workers: int = DEFAULT_WORKERS

    # Cancellation, checked between alphabet sizes
    timeout: Optional[float] = None         # Seconds, None = unlimited
    should_abort: Optional[Callable[[], bool]] = field(default=None, compare=False)


# =============================================================================
# SECTION 2: Canonical Store
# =============================================================================

class CanonicalStore:
    """
    Append-only map from alphabet size k to the canonical words whose
    alphabet is exactly the first k slot letters.

    Sizes are committed strictly in increasing order and never change
    afterwards. `lock` serializes computation so each size is built once.
    """

    def __init__(self):
        self._exact: Dict[int, FrozenSet[Word]] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._exact)

    def __contains__(self, size: int) -> bool:
        return size in self._exact

    def get(self, size: int) -> FrozenSet[Word]:
        if size not in self._exact:
            raise KeyError(f"Size {size} not computed yet")
        return self._exact[size]

    def commit(self, size: int, words: FrozenSet[Word]) -> None:
        if size != len(self._exact):
            raise PreconditionViolation(
                f"Size {size} committed out of order (next is {len(self._exact)})"
            )
        self._exact[size] = words

    def instantiate(self, size: int, letters: Tuple[str, ...]) -> Set[Word]:
        """Relabel the words of a size onto concrete letters."""
        if len(letters) != size:
            raise ValueError(f"Expected {size} letters, got {len(letters)}")
        mapping = slot_mapping(letters)
        return {relabel(word, mapping) for word in self.get(size)}

    def sizes(self) -> Dict[int, int]:
        return {k: len(words) for k, words in self._exact.items()}


DEFAULT_STORE = CanonicalStore()


# =============================================================================
# SECTION 3: Generator
# =============================================================================

class MonoidGenerator:
    """
    Enumerates canonical representatives, reusing a shared CanonicalStore.

    Attributes:
        config: Limits, parallelism and cancellation settings
        store: Memoized canonical words by alphabet size
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 store: Optional[CanonicalStore] = None):
        self.config = config or GeneratorConfig()
        self.store = store if store is not None else DEFAULT_STORE

    def check_size(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Alphabet size must be non-negative, got {n}")
        if n > self.config.max_generators:
            raise AlphabetTooLargeError(n, self.config.max_generators)

    def ensure(self, n: int) -> None:
        """Populate the store for sizes 0..n, aborting cleanly between sizes."""
        self.check_size(n)
        deadline = (time.monotonic() + self.config.timeout
                    if self.config.timeout is not None else None)

        with self.store.lock:
            for size in range(len(self.store), n + 1):
                if self._aborted(deadline):
                    _logger.warning("generation aborted before size %d", size)
                    raise GenerationAborted(size - 1, n)
                started = time.monotonic()
                words = self._compute_size(size)
                self.store.commit(size, words)
                _logger.info("size %d: %d exact words in %.3fs",
                             size, len(words), time.monotonic() - started)

    def _aborted(self, deadline: Optional[float]) -> bool:
        if deadline is not None and time.monotonic() > deadline:
            return True
        return bool(self.config.should_abort and self.config.should_abort())

    def _compute_size(self, size: int) -> FrozenSet[Word]:
        if size == 0:
            return frozenset([IDENTITY])
        slots = tuple(DEFAULT_SYMBOLS[:size])
        if size == 1:
            return frozenset(slots)

        # Canonical words over each (size - 1)-letter sub-alphabet, keyed by
        # the missing letter
        missing: Dict[str, List[Word]] = {
            letter: sorted(self.store.instantiate(
                size - 1, tuple(s for s in slots if s != letter)))
            for letter in slots
        }

        def combine(pair: Tuple[str, str]) -> Set[Word]:
            a, b = pair
            return {trim(p, a, b, q) for p in missing[a] for q in missing[b]}

        pairs = list(product(slots, repeat=2))
        if self.config.parallel and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                parts = list(executor.map(combine, pairs))
        else:
            parts = [combine(pair) for pair in pairs]

        words: Set[Word] = set()
        for part in parts:
            words |= part
        return frozenset(words)

    def exact(self, letters: Tuple[str, ...]) -> Set[Word]:
        """Canonical words whose alphabet is exactly the given letters."""
        letters = tuple(letters)
        self.ensure(len(letters))
        return self.store.instantiate(len(letters), letters)

    def generate(self, n: int, alphabet: Optional[Alphabet] = None) -> Set[Word]:
        """
        All canonical words of the free idempotent monoid on n letters.

        Args:
            n: Number of generators
            alphabet: Letters to use (default: the first n symbols)

        Returns:
            Set of canonical words, the empty word being the identity
        """
        self.check_size(n)
        alphabet = alphabet if alphabet is not None else Alphabet.first(n)
        if len(alphabet) != n:
            raise ValueError(f"Alphabet {alphabet} does not have {n} letters")

        self.ensure(n)
        elements: Set[Word] = set()
        for size in range(n + 1):
            for letters in alphabet.subsets(size):
                elements |= self.store.instantiate(size, letters)
        return elements

    def elements(self, n: int, alphabet: Optional[Alphabet] = None) -> List[Word]:
        """generate(n) in shortlex order, identity first."""
        return sorted(self.generate(n, alphabet), key=sort_key)


def generate(n: int, config: Optional[GeneratorConfig] = None,
             alphabet: Optional[Alphabet] = None) -> Set[Word]:
    """Module-level shortcut using the process-wide store."""
    return MonoidGenerator(config).generate(n, alphabet)
