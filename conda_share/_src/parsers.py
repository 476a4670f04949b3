import json
from typing import List

import yaml
from pydantic import TypeAdapter, ValidationError

from conda_share._src.exceptions import ParseFailure
from conda_share._src.models.environment import CondaEnvExportYaml, EnvironmentExport
from conda_share._src.models.package import CondaPackage


_PACKAGE_LIST = TypeAdapter(List[CondaPackage])


def parse_env_list(text: str) -> List[str]:
    """Pull the environment names out of `conda env list` output.

    Comment lines and unnamed environments (a bare prefix path) are skipped.
    The order conda reports is kept.
    """
    names = []
    for line in text.splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[0] != "#":
            names.append(parts[0])
    return names


def parse_env_export(text: str) -> EnvironmentExport:
    """Parse a `conda env export` document.

    Only plain string dependencies are kept. The `pip:` section is ignored,
    pip packages are taken from `conda list` instead.
    """
    try:
        raw = yaml.safe_load(text)
        parsed = CondaEnvExportYaml.model_validate(raw)
    except (yaml.YAMLError, ValidationError) as err:
        raise ParseFailure("conda env export output", err) from err

    specs = [
        CondaPackage.from_spec_string(dep)
        for dep in parsed.dependencies
        if isinstance(dep, str)
    ]
    return EnvironmentExport(name=parsed.name, channels=parsed.channels, specs=specs)


def parse_package_list(data: str | bytes) -> List[CondaPackage]:
    """Parse the output of `conda list --json`, keeping its order."""
    try:
        return _PACKAGE_LIST.validate_python(json.loads(data))
    except (json.JSONDecodeError, ValidationError) as err:
        raise ParseFailure("conda list output", err) from err
