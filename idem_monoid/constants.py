# idem_monoid/constants.py
"""
Idempotent Monoid Constants

This module defines constants used throughout the idem_monoid package:

LAYER 1: Symbol Constants (Word Layer)
- DEFAULT_SYMBOLS: Ordering from which generator letters are drawn
- IDENTITY_SYMBOL: Display form of the empty word

LAYER 2: Generator Constants (Monoid Layer)
- MAX_GENERATORS: Safety limit on the alphabet size for generation
- DEFAULT_WORKERS: Thread count used for parallel generation
- MAX_TABLE_GENERATORS: Safety limit on the alphabet size for Cayley tables

LAYER 3: Display Constants (Trace Layer)
- TRACE_ARROW: Separator between the rewritten and resulting word
"""
import string


# =============================================================================
# LAYER 1: Symbol Constants (Word Layer)
# =============================================================================

DEFAULT_SYMBOLS = string.ascii_lowercase
IDENTITY_SYMBOL = "0"

assert IDENTITY_SYMBOL not in DEFAULT_SYMBOLS, "Identity symbol must not be a letter"


# =============================================================================
# LAYER 2: Generator Constants (Monoid Layer)
# =============================================================================

# Element counts are 1, 2, 7, 160, 332381 for n = 0..4. n = 5 is out of reach.
MAX_GENERATORS = 4

DEFAULT_WORKERS = 4

# The table is quadratic in the element count: 160^2 entries for n = 3,
# 332381^2 for n = 4.
MAX_TABLE_GENERATORS = 3


# =============================================================================
# LAYER 3: Display Constants (Trace Layer)
# =============================================================================

TRACE_ARROW = " -> "
PRODUCT_SIGN = " * "
