"""Shell command predicates."""

import os
import shlex
import logging
import subprocess
from typing import Any, Optional, Sequence

from recordwise.config import config
from recordwise.predicates.base import Predicate
from recordwise.status import Result

logger = logging.getLogger(__name__)


class CommandPredicate(Predicate):
    """
    Run a shell command per record; its exit code is the status.

    A command containing the placeholder runs as written, with the record
    exported in the environment (``[ "$it" -gt 1 ]``). Any other command gets
    the record appended as one quoted argument (``test -d`` becomes
    ``test -d 'some dir'``). Only the substring is checked, so a command
    whose name contains the placeholder is treated as a template.
    """

    def __init__(self,
                 command: str,
                 shell: Optional[str] = None,
                 placeholder: Optional[str] = None,
                 record_variable: Optional[str] = None):
        self.command = command
        self.shell = shell or config.shell
        self.placeholder = placeholder or config.placeholder
        self.record_variable = record_variable or config.record_variable

    @property
    def is_template(self) -> bool:
        return self.placeholder in self.command

    def evaluate(self, record: Any) -> Result:
        if self.is_template:
            return self._run(self.command, record)
        return self._run(f"{self.command} {shlex.quote(str(record))}", record)

    def invoke(self, records: Sequence[Any]) -> Result:
        line = " ".join([self.command] + [shlex.quote(str(r)) for r in records])
        return self._run(line)

    def _run(self, line: str, record: Any = None) -> Result:
        env = dict(os.environ)
        if record is not None:
            env[self.record_variable] = str(record)

        logger.debug(f"Running {line!r} with {self.shell}")
        completed = subprocess.run(
            [self.shell, "-c", line],
            env=env,
            # The record stream may be our own stdin, keep commands off it
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
        )
        # Decoded by hand, text mode would turn every \r into \n
        stdout = completed.stdout.decode(config.encoding)

        status = completed.returncode
        if status < 0:
            # Killed by a signal, report it the way a shell does
            status = 128 - status

        return Result(status, stdout.rstrip("\n"), stdout)

    def __repr__(self) -> str:
        return f"CommandPredicate({self.command!r})"
