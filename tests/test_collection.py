#!/usr/bin/env python3
"""
Tests for the record iteration operations.
"""

import io
import unittest

from recordwise import collection
from recordwise import (
    ArgumentError, CommandPredicate, Result, Status, TemplatePredicate, current_record
)
from recordwise.predicates.builtins import is_numeric


class Recorder:
    """Predicate that remembers every record it saw."""

    def __init__(self, func):
        self.func = func
        self.seen = []

    def __call__(self, record):
        self.seen.append(record)
        return self.func(record)


class TestCollectionOperations(unittest.TestCase):
    """Test each, every, filter, find, invoke, map, reject and some."""

    def setUp(self):
        """Set up test environment."""
        self.out = io.StringIO()
        self.mixed = "1\n2\n3\na\n"

    def test_filter_keeps_matching_records_in_order(self):
        status = collection.filter(is_numeric, self.mixed, self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "1\n2\n3\n")

    def test_reject_keeps_failing_records(self):
        status = collection.reject(is_numeric, self.mixed, self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "a\n")

    def test_filter_and_reject_partition_the_stream(self):
        """Test that filter and reject split the input into complementary parts."""
        records = ["b", "10", "x", "-4", "", "7", "y"]
        kept, dropped = io.StringIO(), io.StringIO()

        filter_check = Recorder(is_numeric)
        reject_check = Recorder(is_numeric)
        collection.filter(filter_check, iter(records), kept)
        collection.reject(reject_check, iter(records), dropped)

        # Both scan every record, without short-circuit
        self.assertEqual(filter_check.seen, records)
        self.assertEqual(reject_check.seen, records)

        kept_records = kept.getvalue().splitlines()
        dropped_records = dropped.getvalue().splitlines()
        self.assertEqual(kept_records, ["10", "-4", "7"])
        self.assertEqual(dropped_records, ["b", "x", "", "y"])
        self.assertEqual(sorted(kept_records + dropped_records), sorted(records))

    def test_every_stops_at_first_failure(self):
        check = Recorder(is_numeric)
        status = collection.every(check, "1\na\n2\n", self.out)

        self.assertEqual(status, Status.FALSE)
        self.assertEqual(check.seen, ["1", "a"])

    def test_every_normalizes_predicate_status(self):
        status = collection.every(lambda r: Result(42), "x\n", self.out)
        self.assertEqual(status, 1)

    def test_some_short_circuits_on_first_match(self):
        check = Recorder(is_numeric)
        status = collection.some(check, self.mixed, self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(check.seen, ["1"])

    def test_some_without_match(self):
        status = collection.some(is_numeric, "a\nb\n", self.out)
        self.assertEqual(status, Status.FALSE)
        self.assertEqual(self.out.getvalue(), "")

    def test_always_true_predicate(self):
        """Test quantifiers with a predicate that always succeeds."""
        for operation in (collection.each, collection.every, collection.some):
            with self.subTest(operation=operation.__name__):
                self.assertEqual(operation(lambda r: True, "a\nb\nc\n", io.StringIO()), 0)

    def test_each_propagates_predicate_status(self):
        check = Recorder(lambda r: Result(5) if r == "stop" else None)
        status = collection.each(check, "a\nstop\nb\n", self.out)

        self.assertEqual(status, 5)
        self.assertEqual(check.seen, ["a", "stop"])

    def test_each_passes_command_output_through(self):
        status = collection.each(CommandPredicate("printf 'got %s\\n'"), "a b\nc\n", self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "got a b\ngot c\n")

    def test_find_returns_first_match_without_terminator(self):
        check = Recorder(lambda r: r == "a")
        status = collection.find(check, "1\na\n2\na\n", self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "a")
        self.assertEqual(check.seen, ["1", "a"])

    def test_find_not_found(self):
        status = collection.find(lambda r: r == "z", "1\na\n", self.out)

        self.assertEqual(status, Status.FALSE)
        self.assertEqual(self.out.getvalue(), "")

    def test_map_transforms_records(self):
        status = collection.map(lambda r: int(r) + 1, "1\n2\n3\n", self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "2\n3\n4\n")

    def test_map_identity_reproduces_input(self):
        text = "alpha\n beta \n\ngamma\n"
        collection.map(lambda r: r, text, self.out)
        self.assertEqual(self.out.getvalue(), text)

    def test_map_stops_at_failing_record(self):
        """Test that a failure at record k leaves output for records before k only."""
        iteratee = Recorder(lambda r: Result(7) if r == "3" else r.upper())
        status = collection.map(iteratee, "a\nb\n3\nc\nd\n", self.out)

        self.assertEqual(status, 7)
        self.assertEqual(self.out.getvalue(), "A\nB\n")
        self.assertEqual(iteratee.seen, ["a", "b", "3"])

    def test_map_with_template_predicate(self):
        iteratee = TemplatePredicate(lambda: current_record() * 2)
        collection.map(iteratee, "ab\nc\n", self.out)
        self.assertEqual(self.out.getvalue(), "abab\ncc\n")

    def test_invoke_calls_target_once_with_all_records(self):
        calls = []

        def ls(*args):
            calls.append(args)

        status = collection.invoke(ls, "-a\n-l\n", self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(calls, [("-a", "-l")])

    def test_invoke_propagates_target_status(self):
        status = collection.invoke(lambda *args: Result(len(args) + 10), "x\ny\n", self.out)
        self.assertEqual(status, 12)

    def test_invoke_with_command(self):
        status = collection.invoke(CommandPredicate("printf '%s|'"), "-a\n-l\n", self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "-a|-l|")

    def test_missing_predicate_is_argument_error(self):
        """Test that every operation rejects a missing predicate before reading."""
        for name, operation in collection.OPERATIONS.items():
            with self.subTest(operation=name):
                source = io.StringIO("1\n2\n")

                with self.assertRaises(ArgumentError) as ctx:
                    operation(records=source, out=self.out)

                self.assertEqual(ctx.exception.status, 2)
                self.assertEqual(source.tell(), 0)

        with self.assertRaises(ArgumentError):
            collection.each()

    def test_records_from_iterable(self):
        """Test that records need not be text."""
        status = collection.filter(lambda n: n % 2 == 0, range(6), self.out)

        self.assertEqual(status, Status.SUCCESS)
        self.assertEqual(self.out.getvalue(), "0\n2\n4\n")

    def test_empty_stream(self):
        self.assertEqual(collection.each(is_numeric, "", self.out), 0)
        self.assertEqual(collection.every(is_numeric, "", self.out), 0)
        self.assertEqual(collection.some(is_numeric, "", self.out), 1)
        self.assertEqual(collection.find(is_numeric, "", self.out), 1)
        self.assertEqual(self.out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
