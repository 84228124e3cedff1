import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from .common import open_store

@click.command()
@click.pass_context
@handle_exceptions
def clear(ctx):
    """Delete every secret stored for the project."""
    store = open_store(ctx.obj)
    store.clear()
    store.save()
    logger.success("All secrets have been removed.")
