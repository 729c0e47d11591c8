"""
Example: A Tour of the Free Idempotent Monoid

This example generates the monoid on two and three letters, reduces a
word step by step and checks the band laws on the multiplication table.
"""

import numpy as np
from idem_monoid import CayleyTable, MonoidGenerator, canonicalize
from idem_monoid.words import format_word


def main():
    generator = MonoidGenerator()

    print("=" * 60)
    print("Free Idempotent Monoid - Generation and Reduction Demo")
    print("=" * 60)
    print()

    # Example 1: All elements on two letters
    print("Example 1: Elements on {a, b}")
    print("-" * 60)
    print("   " + " ".join(format_word(w) for w in generator.elements(2)))

    for n in range(4):
        print(f"   n={n}: {len(generator.generate(n))} elements")

    print("\n" + "=" * 60)
    print()

    # Example 2: Reduction with a trace
    print("Example 2: Reducing ababcbcbab")
    print("-" * 60)
    result = canonicalize("ababcbcbab")
    lines = result.lines()
    print(f"   {len(lines)} steps, first and last:")
    for line in lines[:3] + ["..."] + lines[-3:]:
        print(f"   {line}")
    print(f"   canonical form: {result}")

    print("\n" + "=" * 60)
    print()

    # Example 3: Multiplication table
    print("Example 3: Cayley table on three letters")
    print("-" * 60)
    table = CayleyTable.build(3, generator)
    print(f"   {len(table)} elements, associative: {table.is_associative()}")
    print(f"   every element idempotent: {len(table.idempotents()) == len(table)}")
    counts = np.bincount(table.table.ravel(), minlength=len(table))
    busiest = int(np.argmax(counts))
    print(f"   most frequent product: {format_word(table.elements[busiest])} "
          f"({counts[busiest]} times)")


if __name__ == "__main__":
    main()
