"""
Error types raised by the idem_monoid package.
"""


class IdemMonoidError(Exception):
    """Base class for all errors raised by this package."""


class InvalidSymbolError(IdemMonoidError, ValueError):
    """A word contains a symbol outside the configured alphabet."""

    def __init__(self, symbol: str, alphabet: str):
        self.symbol = symbol
        self.alphabet = alphabet
        super().__init__(f"Symbol {symbol!r} not in alphabet {alphabet!r}")


class AlphabetTooLargeError(IdemMonoidError, ValueError):
    """The requested generator count exceeds the configured safety limit."""

    def __init__(self, n: int, limit: int):
        self.n = n
        self.limit = limit
        super().__init__(f"n={n} exceeds the generator limit {limit}")


class PreconditionViolation(IdemMonoidError, RuntimeError):
    """An internal routine was called outside its contract."""


class RewriteError(IdemMonoidError, ValueError):
    """A rewrite step does not apply to the word it is replayed on."""


class GenerationAborted(IdemMonoidError, RuntimeError):
    """Generation stopped between size classes by timeout or abort hook."""

    def __init__(self, completed_size: int, requested: int):
        self.completed_size = completed_size
        self.requested = requested
        super().__init__(
            f"Generation aborted after size {completed_size} of {requested}"
        )
