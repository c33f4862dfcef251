"""
recordwise: higher-order operations over line-oriented record streams.

Read records from a pipe, a file or a block of text and hand each one to a
predicate: each, every, filter, find, invoke, map, reject and some.
"""

from recordwise.config import RecordwiseConfig
from recordwise.status import (
    Status,
    Result,
    RecordwiseError,
    ArgumentError,
    PredicateFailure,
    BatchTooLarge,
)
from recordwise.predicates import (
    Predicate,
    PositionalPredicate,
    TemplatePredicate,
    CommandPredicate,
    current_record,
)
from recordwise.streams import Stream, FileStream, iter_records
from recordwise import collection
from recordwise.collection import each, every, filter, find, invoke, map, reject, some

__version__ = "0.1.0"
__license__ = "Apache-2.0"

# filter and map are left out so a star import does not shadow the builtins
__all__ = [
    "RecordwiseConfig",
    "Status",
    "Result",
    "RecordwiseError",
    "ArgumentError",
    "PredicateFailure",
    "BatchTooLarge",
    "Predicate",
    "PositionalPredicate",
    "TemplatePredicate",
    "CommandPredicate",
    "current_record",
    "Stream",
    "FileStream",
    "iter_records",
    "collection",
    "each",
    "every",
    "find",
    "invoke",
    "reject",
    "some",
]
