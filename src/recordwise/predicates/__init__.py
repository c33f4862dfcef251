"""Predicates and iteratees applied to records."""

from recordwise.predicates.base import (
    Predicate,
    PositionalPredicate,
    TemplatePredicate,
    as_predicate,
    current_record,
)
from recordwise.predicates.command import CommandPredicate
from recordwise.predicates.builtins import BUILTINS, resolve_predicate

__all__ = [
    "Predicate",
    "PositionalPredicate",
    "TemplatePredicate",
    "CommandPredicate",
    "as_predicate",
    "current_record",
    "BUILTINS",
    "resolve_predicate",
]
