"""
Stream operators for transformation.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, TypeVar

from recordwise.predicates import Predicate, as_predicate
from recordwise.status import PredicateFailure, Result

T = TypeVar('T')

Echo = Callable[[str], Any]


class StreamOperator(ABC):
    """Base class for stream operators."""

    @abstractmethod
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        """Apply operator to iterator."""
        pass


class PredicateOperator(StreamOperator):
    """Operator driven by a predicate, optionally echoing what it prints."""

    def __init__(self, predicate: Any, echo: Optional[Echo] = None):
        self.predicate: Predicate = as_predicate(predicate)
        self.echo = echo

    def evaluate(self, record: Any) -> Result:
        result = self.predicate.evaluate(record)
        if self.echo is not None and result.stdout:
            self.echo(result.stdout)
        return result


class MapOperator(PredicateOperator):
    """
    Map each element through an iteratee.

    Stops at the first failing element by raising PredicateFailure; values
    already yielded stay yielded. With ``capture`` the rendered text output
    is yielded instead of the raw value.
    """

    def __init__(self, iteratee: Any, capture: bool = False):
        super().__init__(iteratee)
        self.capture = capture

    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        for index, item in enumerate(iterator):
            result = self.evaluate(item)
            if not result.ok:
                raise PredicateFailure(result.status, item, index)
            yield result.output if self.capture else result.value


class FilterOperator(PredicateOperator):
    """Filter elements by predicate."""

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for item in iterator:
            if self.evaluate(item).ok:
                yield item


class RejectOperator(PredicateOperator):
    """Keep elements the predicate fails on."""

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for item in iterator:
            if not self.evaluate(item).ok:
                yield item


class TakeOperator(StreamOperator):
    """Take first n elements."""

    def __init__(self, n: int):
        self.n = n

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        if self.n <= 0:
            return
        for i, item in enumerate(iterator):
            yield item
            if i + 1 >= self.n:
                break


class SkipOperator(StreamOperator):
    """Skip first n elements."""

    def __init__(self, n: int):
        self.n = n

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for i, item in enumerate(iterator):
            if i >= self.n:
                yield item
