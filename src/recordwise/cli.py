"""
CLI: ``recordwise <operation> PREDICATE`` over records read from stdin or a file.
"""

import sys
import logging
from pathlib import Path
from typing import Callable, Optional

import typer

from recordwise import collection
from recordwise.config import config
from recordwise.predicates import BUILTINS, resolve_predicate
from recordwise.status import RecordwiseError, Status

app = typer.Typer(
    name="recordwise",
    help="Feed line records to a predicate, one at a time.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure root logging on stderr."""
    level = logging.DEBUG if verbose else config.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def run_operation(
    name: str,
    operation: Callable[..., int],
    predicate: Optional[str],
    input: Optional[Path],
    shell: Optional[str],
    verbose: bool,
) -> None:
    """Resolve the predicate, run the operation and exit with its status."""
    setup_logging(verbose)

    if predicate is None:
        typer.echo(f"{name}: missing predicate argument", err=True)
        raise typer.Exit(int(Status.ARGUMENT_ERROR))

    if name == "invoke" and predicate in BUILTINS:
        typer.echo(f"{name}: built-in {predicate!r} takes one record, give a command instead", err=True)
        raise typer.Exit(int(Status.ARGUMENT_ERROR))

    resolved = resolve_predicate(predicate, shell=shell)
    logger.debug(f"{name}: using {resolved!r}")

    try:
        status = operation(resolved, input if input is not None else sys.stdin, sys.stdout)
    except RecordwiseError as e:
        typer.echo(f"{name}: {e}", err=True)
        raise typer.Exit(int(e.status))

    sys.stdout.flush()
    raise typer.Exit(int(status))


def _register(name: str, operation: Callable[..., int]) -> None:
    def command(
        predicate: Optional[str] = typer.Argument(
            None, help="Built-in predicate name or shell command"
        ),
        input: Optional[Path] = typer.Option(
            None, "--input", "-i", exists=True, dir_okay=False, help="Read records from FILE instead of stdin"
        ),
        shell: Optional[str] = typer.Option(None, "--shell", help="Shell used to run command predicates"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    ) -> None:
        run_operation(name, operation, predicate, input, shell, verbose)

    command.__doc__ = operation.__doc__
    app.command(name)(command)


for _name, _operation in collection.OPERATIONS.items():
    _register(_name, _operation)


@app.command("builtins")
def list_builtins() -> None:
    """List built-in predicates and iteratees."""
    for name, func in sorted(BUILTINS.items()):
        summary = (func.__doc__ or "").strip().split("\n")[0]
        typer.echo(f"{name:<16}{summary}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
