"""
Decoding line-oriented text into records.
"""

import io
import sys
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, TextIO, Union

from recordwise.config import config
from recordwise.status import BatchTooLarge

logger = logging.getLogger(__name__)

RecordSource = Union[TextIO, str, Path, Iterable[Any]]


def strip_terminator(line: str) -> str:
    """Remove the line terminator from a raw line."""
    if line.endswith("\n"):
        line = line[:-1]
    if config.strip_carriage_return and line.endswith("\r"):
        line = line[:-1]
    return line


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield records from an open text stream until EOF."""
    for line in stream:
        yield strip_terminator(line)


def read_file(path: Union[str, Path], encoding: Optional[str] = None) -> Iterator[str]:
    """Yield records from a file, closing it when iteration ends."""
    with open(path, "r", encoding=encoding or config.encoding, newline="\n") as f:
        yield from read_lines(f)


def iter_records(source: Optional[RecordSource] = None) -> Iterator[Any]:
    """
    Iterate over the records of a source.

    Args:
        source: An open text stream, a Path to read, a literal block of
            text (one record per line) or any other iterable of records.
            None means standard input.

    Nothing is read until the returned iterator is advanced.
    """
    if source is None:
        source = sys.stdin

    if isinstance(source, Path):
        return read_file(source)
    if isinstance(source, str):
        return read_lines(io.StringIO(source))
    if hasattr(source, "read"):
        return read_lines(source)
    if hasattr(source, "__iter__"):
        return iter(source)

    raise TypeError(f"cannot read records from {type(source).__name__}")


def collect_batch(records: Iterable[Any]) -> List[Any]:
    """Collect every record, enforcing the configured batch memory limit."""
    limit = config.batch_memory_limit
    batch = []
    size = 0

    for record in records:
        size += len(str(record)) + 1
        if size > limit:
            raise BatchTooLarge(
                f"batch of {len(batch) + 1} records exceeds "
                f"{config.format_bytes(limit)}"
            )
        batch.append(record)

    logger.debug(f"Collected {len(batch)} records ({config.format_bytes(size)})")
    return batch
