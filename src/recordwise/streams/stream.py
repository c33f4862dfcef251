"""
Lazy record streams.
"""

import io
from pathlib import Path
from typing import (
    Any, Callable, Iterable, Iterator, List, Optional, TextIO, TypeVar, Union
)

from recordwise.config import config
from recordwise.predicates import as_predicate
from recordwise.status import Result
from recordwise.streams.operators import (
    StreamOperator, MapOperator, FilterOperator, RejectOperator,
    TakeOperator, SkipOperator
)
from recordwise.streams.records import collect_batch, read_file, read_lines

T = TypeVar('T')


class Stream(Iterable[T]):
    """
    A lazy stream of records.

    Operators are only applied when the stream is iterated. A stream built
    on a text stream or another iterator can be consumed once.
    """

    def __init__(self, source: Union[Iterable[T], Iterator[T], Callable[[], Iterator[T]]]):
        """
        Initialize stream.

        Args:
            source: Data source (iterable, iterator, or callable returning iterator)
        """
        if callable(source):
            self._source = source
        elif hasattr(source, '__iter__'):
            self._source = lambda: iter(source)
        else:
            raise TypeError("Source must be iterable or callable")

        self._operators: List[StreamOperator] = []

    def __iter__(self) -> Iterator[T]:
        """Create iterator with all operators applied."""
        iterator = self._source()

        for op in self._operators:
            iterator = op.apply(iterator)

        return iterator

    def _chain(self, op: StreamOperator) -> 'Stream':
        new_stream = Stream(self._source)
        new_stream._operators = self._operators.copy()
        new_stream._operators.append(op)
        return new_stream

    # Transformation operators

    def map(self, iteratee: Any) -> 'Stream':
        """Apply iteratee to each record, stopping at the first failure."""
        return self._chain(MapOperator(iteratee))

    def filter(self, predicate: Any) -> 'Stream[T]':
        """Keep records the predicate succeeds on."""
        return self._chain(FilterOperator(predicate))

    def reject(self, predicate: Any) -> 'Stream[T]':
        """Keep records the predicate fails on."""
        return self._chain(RejectOperator(predicate))

    def take(self, n: int) -> 'Stream[T]':
        """Take first n records."""
        return self._chain(TakeOperator(n))

    def skip(self, n: int) -> 'Stream[T]':
        """Skip first n records."""
        return self._chain(SkipOperator(n))

    # Terminal operators

    def each(self, predicate: Any, out: Optional[TextIO] = None) -> int:
        """Run predicate on every record; return the first failing status."""
        from recordwise import collection
        return collection.each(predicate, self, out)

    def every(self, predicate: Any) -> bool:
        predicate = as_predicate(predicate)
        return all(predicate.evaluate(record).ok for record in self)

    def some(self, predicate: Any) -> bool:
        predicate = as_predicate(predicate)
        return any(predicate.evaluate(record).ok for record in self)

    def find(self, predicate: Any) -> Optional[T]:
        """Return the first matching record, or None."""
        predicate = as_predicate(predicate)
        for record in self:
            if predicate.evaluate(record).ok:
                return record
        return None

    def invoke(self, target: Any) -> Result:
        """Call target once with every record as an argument."""
        target = as_predicate(target)
        return target.invoke(collect_batch(self))

    def collect(self) -> List[T]:
        """Collect all records into a list."""
        return list(self)

    def count(self) -> int:
        return sum(1 for _ in self)

    def first(self) -> Optional[T]:
        for item in self:
            return item
        return None

    def to_file(self, path: Union[str, Path], mode: str = 'w') -> int:
        """Write one record per line; return the number written."""
        written = 0
        with open(Path(path), mode, encoding=config.encoding) as f:
            for item in self:
                f.write(f"{item}{config.line_terminator}")
                written += 1
        return written

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Stream[T]':
        """Create stream from iterable."""
        return cls(iterable)

    @classmethod
    def from_text(cls, text: str) -> 'Stream[str]':
        """Create stream from a block of text, one record per line."""
        return cls(lambda: read_lines(io.StringIO(text)))

    @classmethod
    def from_io(cls, stream: TextIO) -> 'Stream[str]':
        """Create stream from an open text stream."""
        return cls(lambda: read_lines(stream))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Stream[str]':
        """Create stream from file."""
        return FileStream(path)


class FileStream(Stream[str]):
    """Stream records from a file."""

    def __init__(self, path: Union[str, Path], encoding: Optional[str] = None):
        self.path = Path(path)
        self.encoding = encoding

        super().__init__(lambda: read_file(self.path, self.encoding))
