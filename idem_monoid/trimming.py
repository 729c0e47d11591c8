"""
Overlap Trimmer

Reassembles normalized pieces p, a, b, q into the shortest word that starts
with p·a and ends with b·q. Any such word keeps the decomposition
(p, a, b, q), so only the junction between the two halves can be shortened.
"""

from .words import Word


def junction_overlap(head: Word, tail: Word) -> int:
    """Length of the longest suffix of head that is also a prefix of tail."""
    for k in range(min(len(head), len(tail)), 0, -1):
        if head.endswith(tail[:k]):
            return k
    return 0


def trim(p: Word, a: str, b: str, q: Word) -> Word:
    """
    Shortest word with prefix p·a and suffix b·q.

    p·a·b·q with a repeated junction u (p·a = s·u, b·q = u·t) carries the
    square uu; removing it leaves s·u·t.

    Args:
        p: Canonical word not containing a
        a: Letter completing the alphabet from the left
        b: Letter completing the alphabet from the right
        q: Canonical word not containing b

    Returns:
        The trimmed candidate word
    """
    head, tail = p + a, b + q
    return head + tail[junction_overlap(head, tail):]
