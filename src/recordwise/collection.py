"""
Iterate over a record stream, yielding each record to a predicate.

Every operation takes the predicate first and a record source second (an
open text stream, a Path, a block of text or any iterable; standard input
when omitted). Output goes to ``out``, standard output by default.

Return values are statuses: 0 for success, 1 for a logical negative (no
match, not all true) and any other value is the predicate's own status.
A missing predicate raises ArgumentError (status 2) before the source is
read.
"""

import sys
import logging
from typing import Any, Optional, TextIO

from recordwise.config import config
from recordwise.predicates import as_predicate
from recordwise.status import PredicateFailure, Result, Status
from recordwise.streams.operators import FilterOperator, MapOperator, RejectOperator
from recordwise.streams.records import RecordSource, collect_batch, iter_records

logger = logging.getLogger(__name__)


def _echo(out: TextIO, result: Result) -> None:
    if result.stdout:
        out.write(result.stdout)


def each(predicate: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """
    Invoke the predicate for every record.

    Stops at the first failure and returns that status unchanged.
    """
    predicate = as_predicate(predicate)
    out = out or sys.stdout

    for index, record in enumerate(iter_records(records)):
        result = predicate.evaluate(record)
        _echo(out, result)
        if not result.ok:
            logger.debug(f"each: stopped at record {index} with status {result.status}")
            return result.status

    return Status.SUCCESS


def every(predicate: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """Return 0 if the predicate holds for every record, 1 at the first that fails."""
    predicate = as_predicate(predicate)
    out = out or sys.stdout

    for index, record in enumerate(iter_records(records)):
        result = predicate.evaluate(record)
        _echo(out, result)
        if not result.ok:
            logger.debug(f"every: record {index} failed with status {result.status}")
            return Status.FALSE

    return Status.SUCCESS


def filter(predicate: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """Write every record the predicate succeeds on, in input order."""
    predicate = as_predicate(predicate)
    out = out or sys.stdout

    for record in FilterOperator(predicate, echo=out.write).apply(iter_records(records)):
        out.write(f"{record}{config.line_terminator}")

    return Status.SUCCESS


def find(predicate: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """Write the first matching record, without a terminator."""
    predicate = as_predicate(predicate)
    out = out or sys.stdout

    for index, record in enumerate(iter_records(records)):
        result = predicate.evaluate(record)
        _echo(out, result)
        if result.ok:
            logger.debug(f"find: matched record {index}")
            out.write(str(record))
            return Status.SUCCESS

    return Status.FALSE


def invoke(target: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """
    Call the target once with all records as its positional arguments.

    Unlike the other operations there is no per-record evaluation: the
    whole stream is collected first, then a single call is made.
    """
    target = as_predicate(target)
    out = out or sys.stdout

    batch = collect_batch(iter_records(records))
    result = target.invoke(batch)
    _echo(out, result)

    return result.status


def map(iteratee: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """
    Write the iteratee's output for every record, one per line.

    Stops at the first failure and returns that status; nothing is written
    for the failing record.
    """
    iteratee = as_predicate(iteratee)
    out = out or sys.stdout

    try:
        for output in MapOperator(iteratee, capture=True).apply(iter_records(records)):
            out.write(f"{output}{config.line_terminator}")
    except PredicateFailure as e:
        logger.debug(f"map: {e}")
        return e.status

    return Status.SUCCESS


def reject(predicate: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """Write every record the predicate fails on, in input order."""
    predicate = as_predicate(predicate)
    out = out or sys.stdout

    for record in RejectOperator(predicate, echo=out.write).apply(iter_records(records)):
        out.write(f"{record}{config.line_terminator}")

    return Status.SUCCESS


def some(predicate: Any = None, records: Optional[RecordSource] = None, out: Optional[TextIO] = None) -> int:
    """Return 0 at the first record the predicate succeeds on, 1 if none."""
    predicate = as_predicate(predicate)
    out = out or sys.stdout

    for index, record in enumerate(iter_records(records)):
        result = predicate.evaluate(record)
        _echo(out, result)
        if result.ok:
            logger.debug(f"some: matched record {index}")
            return Status.SUCCESS

    return Status.FALSE


OPERATIONS = {
    "each": each,
    "every": every,
    "filter": filter,
    "find": find,
    "invoke": invoke,
    "map": map,
    "reject": reject,
    "some": some,
}
