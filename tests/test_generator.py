"""
Tests for the Monoid Generator
"""

import pytest

from idem_monoid import generate, normal_form
from idem_monoid.generator import CanonicalStore, GeneratorConfig, MonoidGenerator
from idem_monoid.errors import (
    AlphabetTooLargeError, GenerationAborted, PreconditionViolation,
)
from idem_monoid.words import Alphabet


def fresh(**kwargs) -> MonoidGenerator:
    return MonoidGenerator(GeneratorConfig(**kwargs), store=CanonicalStore())


class TestCounts:
    @pytest.mark.parametrize("n,count", [(0, 1), (1, 2), (2, 7), (3, 160)])
    def test_known_counts(self, n, count):
        assert len(generate(n)) == count

    def test_two_letter_elements(self):
        assert generate(2) == {"", "a", "b", "ab", "ba", "aba", "bab"}

    def test_elements_order(self):
        assert fresh().elements(2) == ["", "a", "b", "ab", "ba", "aba", "bab"]

    def test_exact_sizes(self):
        gen = fresh()
        gen.ensure(3)
        assert gen.store.sizes() == {0: 1, 1: 1, 2: 4, 3: 144}

    def test_generated_words_are_canonical(self):
        for word in generate(3):
            assert normal_form(word) == word

    def test_custom_alphabet(self):
        elements = fresh().generate(2, Alphabet.from_string("xy"))
        assert elements == {"", "x", "y", "xy", "yx", "xyx", "yxy"}

    def test_exact_subset(self):
        assert fresh().exact(("b", "c")) == {"bc", "cb", "bcb", "cbc"}


class TestParallel:
    def test_parallel_matches_sequential(self):
        sequential = fresh().generate(3)
        parallel = fresh(parallel=True, max_workers=4).generate(3)
        assert parallel == sequential

    def test_store_reused(self):
        gen = fresh()
        gen.generate(2)
        before = gen.store.get(2)
        gen.generate(3)
        assert gen.store.get(2) is before


class TestLimits:
    def test_too_large(self):
        with pytest.raises(AlphabetTooLargeError):
            fresh().generate(5)
        with pytest.raises(AlphabetTooLargeError):
            fresh(max_generators=2).generate(3)

    def test_negative(self):
        with pytest.raises(ValueError):
            fresh().generate(-1)

    def test_alphabet_size_mismatch(self):
        with pytest.raises(ValueError):
            fresh().generate(2, Alphabet.first(3))

    def test_abort_between_sizes(self):
        answers = iter([False, False, True])
        gen = fresh(should_abort=lambda: next(answers))
        with pytest.raises(GenerationAborted) as info:
            gen.generate(3)
        assert info.value.completed_size == 1
        assert len(gen.store) == 2
        assert 2 not in gen.store

    def test_expired_timeout(self):
        gen = fresh(timeout=-1.0)
        with pytest.raises(GenerationAborted):
            gen.generate(2)
        assert len(gen.store) == 0


class TestCanonicalStore:
    def test_commit_in_order(self):
        store = CanonicalStore()
        store.commit(0, frozenset([""]))
        with pytest.raises(PreconditionViolation):
            store.commit(2, frozenset())
        with pytest.raises(KeyError):
            store.get(1)

    def test_instantiate(self):
        store = CanonicalStore()
        for size, words in enumerate([{""}, {"a"}, {"ab", "ba", "aba", "bab"}]):
            store.commit(size, frozenset(words))
        assert store.instantiate(2, ("c", "a")) == {"ca", "ac", "cac", "aca"}
        with pytest.raises(ValueError):
            store.instantiate(2, ("a",))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
