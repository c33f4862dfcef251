"""Lazy record streams and their operators."""

from recordwise.streams.stream import (
    Stream,
    FileStream,
)
from recordwise.streams.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    RejectOperator,
    TakeOperator,
    SkipOperator,
)
from recordwise.streams.records import (
    RecordSource,
    iter_records,
    read_lines,
    read_file,
    collect_batch,
)

__all__ = [
    "Stream",
    "FileStream",
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "RejectOperator",
    "TakeOperator",
    "SkipOperator",
    "RecordSource",
    "iter_records",
    "read_lines",
    "read_file",
    "collect_batch",
]
