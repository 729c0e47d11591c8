"""
idem_monoid/cli.py - Command line interface

Usage:
    python -m idem_monoid <command> [options]

Commands:
    generate    List every element of the free idempotent monoid on N letters
    reduce      Reduce a word to its canonical form
    table       Print the multiplication table on N letters

Examples:
    # The 160 elements on three letters, identity first
    python -m idem_monoid generate 3

    # Save them as a newline-delimited list
    python -m idem_monoid generate 3 --output elements3.txt

    # Canonical form with every rewrite step
    python -m idem_monoid reduce ababcbcbab -v
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .canonical import reduce_word
from .cayley import CayleyTable
from .constants import DEFAULT_WORKERS, MAX_GENERATORS
from .errors import AlphabetTooLargeError, GenerationAborted, InvalidSymbolError
from .generator import GeneratorConfig, MonoidGenerator
from .words import Alphabet, format_word

EXIT_OK = 0
EXIT_INVALID_SYMBOL = 2
EXIT_TOO_LARGE = 3
EXIT_ABORTED = 4

_logger = logging.getLogger(__name__)


def _generator(args) -> MonoidGenerator:
    return MonoidGenerator(GeneratorConfig(
        max_generators=args.max_generators,
        parallel=args.workers > 1,
        max_workers=args.workers,
        timeout=args.timeout,
    ))


def cmd_generate(args) -> int:
    """Emit generate(n), one canonical word per line"""
    elements = _generator(args).elements(args.n)
    lines = [format_word(word) for word in elements]

    if args.output:
        path = Path(args.output)
        path.write_text("\n".join(lines) + "\n")
        _logger.info("wrote %d elements to %s", len(lines), path)
    else:
        for line in lines:
            print(line)
    return EXIT_OK


def cmd_reduce(args) -> int:
    """Emit the canonical form of a word"""
    alphabet = Alphabet.from_string(args.alphabet) if args.alphabet else None
    result = reduce_word(args.word, alphabet, with_trace=args.verbose)
    if args.verbose:
        for line in result.lines():
            print(line)
    print(result)
    return EXIT_OK


def cmd_table(args) -> int:
    """Emit the multiplication table"""
    table = CayleyTable.build(args.n, _generator(args))
    for line in table.lines():
        print(line)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idem-monoid",
        description="Free idempotent monoids: generation and word reduction",
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_generation_options(p):
        p.add_argument("n", type=int, help="Number of generators")
        p.add_argument("--workers", type=int, default=1,
                       help=f"Threads per size class (e.g. {DEFAULT_WORKERS}); 1 = sequential")
        p.add_argument("--timeout", type=float, default=None,
                       help="Abort between size classes after this many seconds")
        p.add_argument("--max-generators", type=int, default=MAX_GENERATORS,
                       help="Safety limit on n")

    p_gen = subparsers.add_parser("generate", help="List all elements")
    add_generation_options(p_gen)
    p_gen.add_argument("--output", "-o", default=None,
                       help="Write the element list to this file")
    p_gen.set_defaults(func=cmd_generate)

    p_red = subparsers.add_parser("reduce", help="Reduce a word")
    p_red.add_argument("word", help="Word to reduce (0 is the identity)")
    p_red.add_argument("--alphabet", "-a", default=None,
                       help="Declared alphabet, e.g. abc (default: inferred)")
    p_red.add_argument("--verbose", "-v", action="store_true",
                       help="Show every rewrite step")
    p_red.set_defaults(func=cmd_reduce)

    p_tab = subparsers.add_parser("table", help="Print the multiplication table")
    add_generation_options(p_tab)
    p_tab.set_defaults(func=cmd_table)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    try:
        return args.func(args)
    except InvalidSymbolError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_SYMBOL
    except AlphabetTooLargeError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_TOO_LARGE
    except GenerationAborted as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ABORTED


if __name__ == "__main__":
    sys.exit(main())
