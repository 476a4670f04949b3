from pathlib import Path

from conda_share._src.constants import ENV_FILE_SUFFIX


def env_file_name(env_name: str) -> str:
    return f"{env_name}{ENV_FILE_SUFFIX}"


def resolve_output_path(env_name: str, path: str | Path | None = None) -> Path:
    """Where to save the env file.

    No path means `<env_name>.yml` in the working directory, a directory
    means `<env_name>.yml` inside it, anything else is used as is.
    """
    if path is None:
        return Path(env_file_name(env_name))
    path = Path(path)
    if path.is_dir():
        return path / env_file_name(env_name)
    return path
