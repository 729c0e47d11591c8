"""
Tests for the Cayley table
"""

import numpy as np
import pytest

from idem_monoid.cayley import CayleyTable, concatenate
from idem_monoid.errors import AlphabetTooLargeError


@pytest.fixture(scope="module")
def table2():
    return CayleyTable.build(2)


class TestCayleyTable:
    def test_one_letter(self):
        table = CayleyTable.build(1)
        assert table.elements == ["", "a"]
        assert table.lines() == ["0 * 0 = 0", "0 * a = a", "a * 0 = a", "a * a = a"]

    def test_shape(self, table2):
        assert len(table2) == 7
        assert table2.table.shape == (7, 7)
        assert table2.table.dtype == np.int32

    def test_products(self, table2):
        assert table2.multiply("ab", "ba") == "aba"
        assert table2.multiply("ab", "ab") == "ab"
        assert table2.multiply("a", "bab") == "ab"
        assert table2.multiply("", "ba") == "ba"

    def test_identity(self, table2):
        e = table2.identity_index()
        assert np.array_equal(table2.table[e, :], np.arange(7))
        assert np.array_equal(table2.table[:, e], np.arange(7))

    def test_band_laws(self, table2):
        assert table2.is_associative()
        assert table2.idempotents() == table2.elements

    def test_lines(self, table2):
        lines = table2.lines()
        assert len(lines) == 49
        assert "ab * ba = aba" in lines

    def test_index_of_unreduced_word(self, table2):
        assert table2.index_of("abab") == table2.index_of("ab")

    def test_refuses_four_letters(self):
        with pytest.raises(AlphabetTooLargeError):
            CayleyTable.build(4)

    def test_three_letters_associative(self):
        table = CayleyTable.build(3)
        assert len(table) == 160
        assert table.is_associative()


class TestConcatenate:
    def test_joins_without_repeat(self):
        assert concatenate("ab", "ba") == "aba"
        assert concatenate("ab", "ab") == "abab"
        assert concatenate("", "a") == "a"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
