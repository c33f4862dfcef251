#!/usr/bin/env python3
"""
Basic usage examples for recordwise.
"""

import io
import sys

import recordwise
from recordwise import (
    CommandPredicate,
    RecordwiseConfig,
    Result,
    Stream,
    TemplatePredicate,
    current_record,
)
from recordwise.predicates.builtins import is_numeric


def example_quantifiers():
    """Example: every, some and find over a block of text."""
    print("\n=== Quantifiers Example ===")

    records = "1\n2\n3\na\n"
    print(f"every is_numeric: {recordwise.every(is_numeric, records)}")
    print(f"some is_numeric:  {recordwise.some(is_numeric, records)}")

    out = io.StringIO()
    recordwise.find(lambda r: r == "a", records, out)
    print(f"find 'a': {out.getvalue()!r}")


def example_filter_and_map():
    """Example: selection and transformation, written to stdout."""
    print("\n=== Filter / Map Example ===")

    recordwise.filter(is_numeric, "1\n2\n3\na\n")
    recordwise.reject(is_numeric, "1\n2\n3\na\n")
    recordwise.map(lambda r: int(r) + 1, "1\n2\n3\n")

    # A failing iteratee stops the map; earlier output stays
    status = recordwise.map(lambda r: r.upper() if r != "stop" else Result(3), "a\nb\nstop\nc\n")
    print(f"map stopped with status {status}")


def example_template_predicates():
    """Example: predicates that read the record themselves."""
    print("\n=== Template Predicate Example ===")

    long_words = TemplatePredicate(lambda: len(current_record()) > 3)
    print(Stream.from_text("tree\nfox\nriver\n").filter(long_words).collect())

    # Shell commands: $it holds the record in template form
    recordwise.each(CommandPredicate('echo "record: $it"'), "alpha\nbeta\n")


def example_invoke():
    """Example: one call with every record as an argument."""
    print("\n=== Invoke Example ===")

    def show(*args):
        print(f"called with {args}")

    recordwise.invoke(show, "-a\n-l\n")
    recordwise.invoke(CommandPredicate("ls"), "-a\n-l\n")


def example_stdin():
    """Example: read records piped into this script."""
    if sys.stdin.isatty():
        return
    print("\n=== Stdin Example ===")
    print(f"lines piped in: {Stream.from_io(sys.stdin).count()}")


def main():
    """Run all examples."""
    print("=== recordwise Examples ===")

    RecordwiseConfig.set_defaults(shell="/bin/sh")

    example_quantifiers()
    example_filter_and_map()
    example_template_predicates()
    example_invoke()
    example_stdin()

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
