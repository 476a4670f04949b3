import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from conda_share._src.config import load_config
from conda_share._src.exceptions import CondaShareError
from conda_share._src.runner import CommandRunner, SubprocessRunner


LOGGER = logging.getLogger(__name__)

err_console = Console(stderr=True)


def get_runner(conda: Optional[str] = None) -> CommandRunner:
    config = load_config(conda=conda, environ=os.environ)
    LOGGER.debug("Using conda executable %s", config.conda_executable)
    return SubprocessRunner(config.conda_executable)


def fail(err: CondaShareError) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {escape(err.msg)}", soft_wrap=True)
    return typer.Exit(code=1)


def configure_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")
