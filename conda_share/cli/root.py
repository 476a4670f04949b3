import typer
from typing_extensions import Annotated

from conda_share._src.config import save_conda_path
from conda_share._src.exceptions import CondaShareError
from conda_share._src.sharable import SharableEnvBuilder
from conda_share._src.utils import resolve_output_path
from conda_share.cli import common
from conda_share.cli.env import env_command


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(
    env_command,
    name="env",
    help="inspect conda environments",
    rich_help_panel="Environments",
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        help="logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """Create sharable environment.yml files from conda environments"""
    common.configure_logging(log_level)


@app.command()
def share(
    env_name: Annotated[str, typer.Argument(
        help="name of the conda environment"
    )],
    path: Annotated[str, typer.Option(
        "--path", "-p",
        help="path of the output file, or a folder to save <env_name>.yml in"
    )] = None,
    display: Annotated[bool, typer.Option(
        "--display", "-d",
        help="print the environment file instead of saving it"
    )] = False,
    conda: str = typer.Option(
        None,
        help="conda executable to use"
    ),
):
    """Generate a sharable environment file for a conda environment"""
    try:
        builder = SharableEnvBuilder.from_runner(common.get_runner(conda))
        sharable = builder.build_descriptor(env_name)

        # If display is set dump yaml output to stdout
        if display:
            typer.echo(sharable.to_yaml(), nl=False)
            return

        written = sharable.save(resolve_output_path(env_name, path))
    except CondaShareError as err:
        raise common.fail(err)

    typer.echo(f"Saved environment '{env_name}' to {written}")


@app.command()
def set_conda(
    executable: Annotated[str, typer.Argument(
        help="path to the conda executable"
    )],
):
    """Remember which conda executable to use"""
    try:
        config_file = save_conda_path(executable)
    except CondaShareError as err:
        raise common.fail(err)
    typer.echo(f"Saved conda path to {config_file}")
