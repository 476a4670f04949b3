import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

from conda_share._src.exceptions import CommandExecutionFailed


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    stdout: bytes
    stderr: bytes
    exit_code: int


class CommandRunner(Protocol):
    def run(self, args: Sequence[str]) -> CommandResult:
        """Run conda with `args` and return its raw output and exit code"""
        ...


class SubprocessRunner:
    def __init__(self, executable: str):
        """Runs the conda executable in a subprocess.

        Parameters
        ----------
        executable: str
            Path to (or name on PATH of) the conda executable
        """
        self.executable = executable

    def run(self, args: Sequence[str]) -> CommandResult:
        command = [self.executable, *args]
        LOGGER.debug("Running %s", " ".join(command))
        # TODO: no timeout is applied, a hung conda process hangs the caller
        try:
            proc = subprocess.run(command, capture_output=True)
        except OSError as err:
            raise CommandExecutionFailed(self.executable, err) from err
        LOGGER.debug("%s exited with %s", " ".join(command), proc.returncode)
        return CommandResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            exit_code=proc.returncode,
        )
