"""Status codes, predicate results and the error taxonomy."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Any, Optional


class Status(IntEnum):
    """Statuses with a fixed meaning. Any other code belongs to a predicate."""
    SUCCESS = 0
    FALSE = 1
    ARGUMENT_ERROR = 2


@dataclass(frozen=True)
class Result:
    """Outcome of one predicate evaluation."""
    status: int = Status.SUCCESS
    value: Any = None
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS

    @property
    def output(self) -> str:
        """Captured output as map() emits it."""
        if self.value is None:
            return ""
        return str(self.value).rstrip("\n")

    @classmethod
    def of(cls, value: Any) -> 'Result':
        """
        Normalize a callable's return value.

        A Result passes through, True and None mean success, False means
        failure and anything else is a successful value.

        Functions returning Optional values (``re.fullmatch``, ``dict.get``,
        ``shutil.which``) therefore always succeed. Wrap them in ``bool()``
        when used as predicates.
        """
        if isinstance(value, Result):
            return value
        if value is None or value is True:
            return cls(Status.SUCCESS)
        if value is False:
            return cls(Status.FALSE)
        return cls(Status.SUCCESS, value)


class RecordwiseError(Exception):
    """Base error. ``status`` is the exit status it maps to."""

    status: int = Status.FALSE

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        if status is not None:
            self.status = status


class ArgumentError(RecordwiseError):
    """The predicate argument was not supplied."""

    status = Status.ARGUMENT_ERROR


class PredicateFailure(RecordwiseError):
    """A lazy operator met a failing iteratee."""

    def __init__(self, status: int, record: Any, index: int):
        super().__init__(f"iteratee failed with status {status} on record {index}", status)
        self.record = record
        self.index = index


class BatchTooLarge(RecordwiseError):
    """invoke() collected more than the configured batch limit."""
