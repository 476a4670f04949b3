import configparser
from pathlib import Path
from typing import Mapping, Optional

from platformdirs import user_config_path
from pydantic import BaseModel

from conda_share._src.constants import (
    APP_NAME,
    CONFIG_KEY,
    CONFIG_SECTION,
    DEFAULT_CONDA_EXECUTABLE,
)
from conda_share._src.exceptions import IoFailure


class CondaShareConfig(BaseModel):
    conda_executable: str = DEFAULT_CONDA_EXECUTABLE


def default_config_file() -> Path:
    return Path(user_config_path(APP_NAME)) / "settings.ini"


def load_config(
    conda: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_file: Optional[Path] = None,
) -> CondaShareConfig:
    """Work out which conda executable to run.

    Nothing is read from the process environment here; callers that want
    `CONDA_EXE` honoured pass `os.environ` in explicitly.

    Parameters
    ----------
    conda: str | None
        Explicit executable, wins over everything else
    environ: Mapping | None
        Environment variables to consult for `CONDA_EXE`
    config_file: Path | None
        Settings file, defaults to the user config dir

    Returns
    -------
    CondaShareConfig
    """
    if conda:
        return CondaShareConfig(conda_executable=conda)

    if environ and environ.get("CONDA_EXE"):
        return CondaShareConfig(conda_executable=environ["CONDA_EXE"])

    saved = load_conda_path(config_file)
    if saved:
        return CondaShareConfig(conda_executable=saved)

    return CondaShareConfig()


def load_conda_path(config_file: Optional[Path] = None) -> Optional[str]:
    config = _read_config(config_file or default_config_file())
    if config is None or CONFIG_SECTION not in config:
        return None
    value = config[CONFIG_SECTION].get(CONFIG_KEY, "").strip()
    return value or None


def save_conda_path(conda_path: str, config_file: Optional[Path] = None) -> Path:
    file_path = config_file or default_config_file()
    config = _read_config(file_path) or configparser.ConfigParser()
    if CONFIG_SECTION not in config:
        config[CONFIG_SECTION] = {}
    config[CONFIG_SECTION][CONFIG_KEY] = conda_path
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8") as handle:
            config.write(handle)
    except OSError as err:
        raise IoFailure(file_path, err) from err
    return file_path


def _read_config(file_path: Path) -> Optional[configparser.ConfigParser]:
    if not file_path.exists():
        return None
    config = configparser.ConfigParser()
    config.read(file_path, encoding="utf-8")
    return config
