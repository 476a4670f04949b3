import typer
from typing_extensions import Annotated

from rich.table import Table
import rich

from conda_share._src.catalog import EnvironmentCatalog
from conda_share._src.conda import Conda
from conda_share._src.exceptions import CondaShareError
from conda_share._src.sharable import SharableEnvBuilder
from conda_share.cli import common


env_command = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@env_command.command("list")
def list_envs(
    conda: str = typer.Option(
        None,
        help="conda executable to use"
    ),
):
    """List all named conda environments"""
    try:
        catalog = EnvironmentCatalog(Conda(common.get_runner(conda)))
        names = catalog.list_environments()
    except CondaShareError as err:
        raise common.fail(err)

    table = Table(title="Environments")
    table.add_column("name", justify="left", no_wrap=True)
    for name in names:
        table.add_row(name)

    rich.print(table)


@env_command.command()
def show(
    env_name: Annotated[str, typer.Argument(
        help="name of the conda environment"
    )],
    conda: str = typer.Option(
        None,
        help="conda executable to use"
    ),
):
    """Show which packages would go into the sharable environment file"""
    try:
        builder = SharableEnvBuilder.from_runner(common.get_runner(conda))
        sharable = builder.build_descriptor(env_name)
    except CondaShareError as err:
        raise common.fail(err)

    table = Table(title=f"{sharable.name} ({', '.join(sharable.channels)})")
    table.add_column("name", justify="left", no_wrap=True)
    table.add_column("version", justify="left", no_wrap=True)
    table.add_column("build", justify="left", no_wrap=True)
    table.add_column("source", justify="left", no_wrap=True)

    for pkg in sharable.conda_deps:
        table.add_row(pkg.name, pkg.version or "", pkg.build or "", "conda")
    for pkg in sharable.pip_deps:
        table.add_row(pkg.name, pkg.version or "", pkg.build or "", "pip")

    rich.print(table)
