"""Built-in predicates and iteratees addressable by name."""

import os
import re
import shutil
from typing import Callable, Dict, Optional

from recordwise.predicates.base import Predicate, PositionalPredicate
from recordwise.predicates.command import CommandPredicate

_NUMERIC = re.compile(r"[+-]?[0-9]+")


def is_numeric(record: str) -> bool:
    """Record is an integer, optionally signed."""
    return _NUMERIC.fullmatch(record) is not None


def is_blank(record: str) -> bool:
    """Record is empty or whitespace only."""
    return not record.strip()


def command_exists(record: str) -> bool:
    """Record names an executable on PATH."""
    return bool(record) and shutil.which(record) is not None


def path_exists(record: str) -> bool:
    """Record is an existing file or directory."""
    return bool(record) and os.path.exists(record)


def escape_ansi(record: str) -> str:
    """Show ANSI escape sequences as-is."""
    return record.replace("\x1b", "\\e")


BUILTINS: Dict[str, Callable[[str], object]] = {
    "is_numeric": is_numeric,
    "is_blank": is_blank,
    "command_exists": command_exists,
    "path_exists": path_exists,
    "escape_ansi": escape_ansi,
}


def resolve_predicate(reference: str, shell: Optional[str] = None) -> Predicate:
    """Look a name up in BUILTINS, otherwise treat it as a shell command."""
    if reference in BUILTINS:
        return PositionalPredicate(BUILTINS[reference])
    return CommandPredicate(reference, shell=shell)
