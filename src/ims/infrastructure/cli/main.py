import click

from ims.domain.model.value_objects import Category
from ims.infrastructure.bootstrap import build_workspace
from ims.infrastructure.cli.menu import InventoryMenu
from ims.infrastructure.config import get_settings
from ims.infrastructure.logging_config import configure_logging


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override IMS_LOG_LEVEL for this run.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """IMS: Inventory Management System"""
    settings = get_settings()
    configure_logging(level=log_level or settings.log_level)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@cli.command()
def menu() -> None:
    """Run the interactive inventory menu (contents last for this run only)."""
    InventoryMenu(build_workspace()).run()


@cli.command()
def categories() -> None:
    """List the valid item categories."""
    for category in Category:
        click.echo(category.value)
