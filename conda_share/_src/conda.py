import logging
from typing import List, Sequence

from conda_share._src.exceptions import CommandFailed, EncodingFailure
from conda_share._src.models.environment import EnvironmentExport
from conda_share._src.models.package import CondaPackage
from conda_share._src.parsers import parse_env_export, parse_env_list, parse_package_list
from conda_share._src.runner import CommandRunner


LOGGER = logging.getLogger(__name__)


class Conda():
    def __init__(self, runner: CommandRunner):
        """Conda wraps the handful of conda commands needed to describe
        an environment.

        Parameters
        ----------
        runner: CommandRunner
            Runs the conda executable, see `SubprocessRunner`
        """
        self.runner = runner

    def command(self, args: Sequence[str]) -> str:
        """Run a conda command and return its stdout as text.

        Raises
        ------
        CommandFailed
            If conda exits with a non-zero status
        EncodingFailure
            If stdout is not valid UTF-8
        """
        args = list(args)
        result = self.runner.run(args)
        if result.exit_code != 0:
            stderr = result.stderr.decode("utf-8", errors="replace")
            raise CommandFailed(args, stderr)
        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as err:
            raise EncodingFailure(args, err) from err

    def env_list(self) -> List[str]:
        return parse_env_list(self.command(["env", "list"]))

    def env_export(self, env_name: str, from_history: bool = False) -> EnvironmentExport:
        if from_history:
            args = ["env", "export", "--from-history", "-n", env_name]
        else:
            args = ["env", "export", "-n", env_name]
        return parse_env_export(self.command(args))

    def list_packages(self, env_name: str) -> List[CondaPackage]:
        return parse_package_list(self.command(["list", "-n", env_name, "--json"]))
