"""
Cross-checks against brute force over the square-rewrite relation
"""

from collections import defaultdict, deque
from itertools import product

import pytest

from idem_monoid import generate, normal_form


def all_words(letters, max_length):
    for length in range(max_length + 1):
        for letters_ in product(letters, repeat=length):
            yield "".join(letters_)


def square_removals(word):
    """Every word reachable from word by removing one square."""
    for size in range(1, len(word) // 2 + 1):
        for i in range(len(word) - 2 * size + 1):
            if word[i:i + size] == word[i + size:i + 2 * size]:
                yield word[:i + size] + word[i + 2 * size:]


def square_free_descendants(word):
    """Square-free words reachable from word by removals only (BFS)."""
    seen, queue, found = {word}, deque([word]), set()
    while queue:
        current = queue.popleft()
        children = list(square_removals(current))
        if not children:
            found.add(current)
        for child in children:
            if child not in seen:
                seen.add(child)
                queue.append(child)
    return found


class Union:
    """Union-find over words, always keeping the shortest word as the root."""

    def __init__(self):
        self.parent = {}

    def find(self, word):
        self.parent.setdefault(word, word)
        while self.parent[word] != word:
            self.parent[word] = self.parent[self.parent[word]]
            word = self.parent[word]
        return word

    def union(self, u, v):
        ru, rv = self.find(u), self.find(v)
        if ru != rv:
            keep, drop = sorted([ru, rv], key=lambda w: (len(w), w))
            self.parent[drop] = keep


class TestTwoLetters:
    def test_removal_normal_forms(self):
        # Binary square-free words are exactly the seven canonical words
        for word in all_words("ab", 9):
            assert square_free_descendants(word) == {normal_form(word)}

    def test_union_find_classes(self):
        u = Union()
        for word in all_words("ab", 8):
            u.find(word)
            for child in square_removals(word):
                u.union(word, child)
        roots = {u.find(word) for word in all_words("ab", 8)}
        assert roots == generate(2)


class TestThreeLetters:
    def test_removal_preserves_class(self):
        for word in all_words("abc", 7):
            nf = normal_form(word)
            for child in square_removals(word):
                assert normal_form(child) == nf

    def test_canonical_words_are_shortest(self):
        classes = defaultdict(list)
        for word in all_words("abc", 6):
            classes[normal_form(word)].append(word)
        for nf, members in classes.items():
            if len(nf) > 6:
                continue
            shortest = min(len(w) for w in members)
            assert [w for w in members if len(w) == shortest] == [nf]

    def test_every_element_reached(self):
        reached = {normal_form(word) for word in all_words("abc", 8)}
        assert reached == generate(3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
