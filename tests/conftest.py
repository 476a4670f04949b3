import json
from typing import Dict, List, Sequence, Tuple

import pytest

from conda_share._src.runner import CommandResult


ENV_LIST = """\
# conda environments:
#
base                     /opt/conda
data                  *  /opt/conda/envs/data
scratch                  /opt/conda/envs/scratch
                         /home/user/unnamed-prefix

"""

HISTORY_EXPORT = """\
name: data
channels:
  - conda-forge
  - defaults
dependencies:
  - python=3.11
  - numpy
  - pandas
prefix: /opt/conda/envs/data
"""

FULL_EXPORT = """\
name: data
channels:
  - conda-forge
  - defaults
dependencies:
  - ca-certificates=2023.7.22=hbcca054_0
  - numpy=1.26.0=py311h64a7726_0
  - openssl=3.1.3=hd590300_0
  - python=3.11.5=hab00c5b_0_cpython
  - pip:
      - flask==2.3.0
prefix: /opt/conda/envs/data
"""

INVENTORY = [
    {
        "base_url": "https://conda.anaconda.org/conda-forge",
        "build_number": 0,
        "build_string": "hbcca054_0",
        "channel": "conda-forge",
        "dist_name": "ca-certificates-2023.7.22-hbcca054_0",
        "name": "ca-certificates",
        "platform": "linux-64",
        "version": "2023.7.22",
    },
    {
        "base_url": "https://pypi.org/",
        "build_number": 0,
        "build_string": "pypi_0",
        "channel": "pypi",
        "dist_name": "flask-2.3.0-pypi_0",
        "name": "flask",
        "platform": "pypi",
        "version": "2.3.0",
    },
    {
        "base_url": "https://conda.anaconda.org/conda-forge",
        "build_number": 0,
        "build_string": "py311h64a7726_0",
        "channel": "conda-forge",
        "dist_name": "numpy-1.26.0-py311h64a7726_0",
        "name": "numpy",
        "platform": "linux-64",
        "version": "1.26.0",
    },
    {
        "base_url": "https://conda.anaconda.org/conda-forge",
        "build_number": 0,
        "build_string": "hd590300_0",
        "channel": "conda-forge",
        "dist_name": "openssl-3.1.3-hd590300_0",
        "name": "openssl",
        "platform": "linux-64",
        "version": "3.1.3",
    },
    {
        "base_url": "https://conda.anaconda.org/conda-forge",
        "build_number": 0,
        "build_string": "hab00c5b_0_cpython",
        "channel": "conda-forge",
        "dist_name": "python-3.11.5-hab00c5b_0_cpython",
        "name": "python",
        "platform": "linux-64",
        "version": "3.11.5",
    },
]

EXPECTED_YAML = """\
name: data
channels:
  - conda-forge
  - defaults
dependencies:
  - numpy=1.26.0
  - python=3.11.5
  - pip:
      - flask==2.3.0
"""


def ok(text: str) -> CommandResult:
    return CommandResult(stdout=text.encode("utf-8"), stderr=b"", exit_code=0)


class FakeRunner:
    """Answers conda commands from a table of canned results"""
    def __init__(self, responses: Dict[Tuple[str, ...], CommandResult]):
        self.responses = responses
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        try:
            return self.responses[tuple(args)]
        except KeyError:
            raise AssertionError(f"unexpected conda call: {list(args)}")


def env_responses(
    env_name: str = "data",
    env_list: str = ENV_LIST,
    history: str = HISTORY_EXPORT,
    full: str = FULL_EXPORT,
    inventory: list = INVENTORY,
) -> Dict[Tuple[str, ...], CommandResult]:
    return {
        ("env", "list"): ok(env_list),
        ("env", "export", "--from-history", "-n", env_name): ok(history),
        ("env", "export", "-n", env_name): ok(full),
        ("list", "-n", env_name, "--json"): ok(json.dumps(inventory)),
    }


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(env_responses())
