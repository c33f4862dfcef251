"""
Predicate capability and the adapters callers construct explicitly.
"""

import contextvars
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from recordwise.status import ArgumentError, Result

_current_record: contextvars.ContextVar = contextvars.ContextVar("recordwise_current_record")


def current_record() -> Any:
    """Return the record a TemplatePredicate is evaluating."""
    try:
        return _current_record.get()
    except LookupError:
        raise RuntimeError("current_record() used outside a template predicate") from None


class Predicate(ABC):
    """Base class for predicates and iteratees."""

    @abstractmethod
    def evaluate(self, record: Any) -> Result:
        """Evaluate against a single record."""
        pass

    def invoke(self, records: Sequence[Any]) -> Result:
        """Call once with every record as a positional argument."""
        raise TypeError(f"{type(self).__name__} does not support batch invocation")

    def __call__(self, record: Any) -> Result:
        return self.evaluate(record)


class PositionalPredicate(Predicate):
    """
    Pass the record as the only argument.

    The return value is normalized by ``Result.of``: a ``None`` return is a
    success, so ``re.compile(...).fullmatch`` matches every record. Use
    ``lambda r: bool(pattern.fullmatch(r))`` instead.
    """

    def __init__(self, func: Callable[..., Any]):
        self.func = func

    def evaluate(self, record: Any) -> Result:
        return Result.of(self.func(record))

    def invoke(self, records: Sequence[Any]) -> Result:
        return Result.of(self.func(*records))

    def __repr__(self) -> str:
        return f"PositionalPredicate({getattr(self.func, '__name__', self.func)!r})"


class TemplatePredicate(Predicate):
    """
    Call a zero-argument function that reads the record itself.

    While the function runs, ``current_record()`` returns the record:

        TemplatePredicate(lambda: current_record().startswith("#"))
    """

    def __init__(self, func: Callable[[], Any]):
        self.func = func

    def evaluate(self, record: Any) -> Result:
        token = _current_record.set(record)
        try:
            return Result.of(self.func())
        finally:
            _current_record.reset(token)

    def __repr__(self) -> str:
        return f"TemplatePredicate({getattr(self.func, '__name__', self.func)!r})"


def as_predicate(obj: Any) -> Predicate:
    """Wrap a plain callable; reject a missing predicate with ArgumentError."""
    if obj is None:
        raise ArgumentError("missing predicate argument")
    if isinstance(obj, Predicate):
        return obj
    if callable(obj):
        return PositionalPredicate(obj)
    raise TypeError(f"predicate must be a Predicate or callable, not {type(obj).__name__}")
