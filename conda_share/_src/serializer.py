import logging
from pathlib import Path
from typing import List

from conda_share._src.exceptions import IoFailure, MissingVersion
from conda_share._src.models.environment import SharableEnvironment
from conda_share._src.models.package import CondaPackage


LOGGER = logging.getLogger(__name__)


def render(env: SharableEnvironment) -> str:
    """Render a sharable environment as an environment.yml document.

    The layout is written out by hand rather than with a yaml dumper so the
    output is byte for byte stable:

        name: <name>
        channels:
          - <channel>
        dependencies:
          - <name>=<version>
          - pip:
              - <name>==<version>

    Raises
    ------
    MissingVersion
        If any emitted package has no version. Nothing is returned in
        that case.
    """
    lines: List[str] = [f"name: {env.name}"]

    lines.append("channels:")
    lines.extend(f"  - {channel}" for channel in env.channels)

    if env.conda_deps or env.pip_deps:
        lines.append("dependencies:")
    for dep in env.conda_deps:
        lines.append(f"  - {dep.name}={_version(dep)}")

    if env.pip_deps:
        lines.append("  - pip:")
        for dep in env.pip_deps:
            lines.append(f"      - {dep.name}=={_version(dep)}")

    return "".join(f"{line}\n" for line in lines)


def _version(package: CondaPackage) -> str:
    if package.version is None:
        raise MissingVersion(package.name)
    return package.version


def write_env_file(env: SharableEnvironment, path: str | Path) -> Path:
    """Render `env` and write it to `path` as UTF-8.

    The file is only opened once rendering succeeded, so a failed render
    never leaves a partial file behind.
    """
    path = Path(path)
    text = render(env)
    try:
        path.write_bytes(text.encode("utf-8"))
    except OSError as err:
        raise IoFailure(path, err) from err
    LOGGER.info("Wrote environment '%s' to %s", env.name, path)
    return path
