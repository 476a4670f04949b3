import logging

from conda_share._src.catalog import EnvironmentCatalog
from conda_share._src.conda import Conda
from conda_share._src.exceptions import EnvNotFound
from conda_share._src.models.environment import SharableEnvironment
from conda_share._src.runner import CommandRunner


LOGGER = logging.getLogger(__name__)


class SharableEnvBuilder():
    @classmethod
    def from_runner(cls, runner: CommandRunner):
        conda = Conda(runner)
        return cls(conda=conda, catalog=EnvironmentCatalog(conda))

    def __init__(self, conda: Conda, catalog: EnvironmentCatalog):
        self.conda = conda
        self.catalog = catalog

    def build_descriptor(self, env_name: str) -> SharableEnvironment:
        """Build the sharable description of a conda environment.

        `conda env export --from-history` tells us which packages the user
        asked for, but its versions are missing or truncated. `conda list`
        is the source of truth for what is actually installed and where it
        came from, so versions and builds are always taken from it.

        A package requested by name that was also installed from pypi ends
        up in both `conda_deps` and `pip_deps`.

        Raises
        ------
        EnvNotFound
            If conda doesn't know `env_name`. No other conda command is run.
        """
        available = self.catalog.list_environments()
        if env_name not in available:
            raise EnvNotFound(env_name, available)

        requested = self.conda.env_export(env_name, from_history=True).spec_names
        full_export = self.conda.env_export(env_name, from_history=False)
        installed = self.conda.list_packages(env_name)

        conda_deps = []
        pip_deps = []
        for package in installed:
            if package.name in requested:
                conda_deps.append(package)
            if package.is_pip:
                pip_deps.append(package)

        LOGGER.info(
            "Environment '%s': %s requested conda packages, %s pip packages (of %s installed)",
            env_name,
            len(conda_deps),
            len(pip_deps),
            len(installed),
        )
        return SharableEnvironment(
            name=full_export.name,
            channels=full_export.channels,
            conda_deps=conda_deps,
            pip_deps=pip_deps,
        )


def sharable_env(runner: CommandRunner, env_name: str) -> SharableEnvironment:
    return SharableEnvBuilder.from_runner(runner).build_descriptor(env_name)
