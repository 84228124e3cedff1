import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from .common import open_store

@click.command()
@click.argument("key")
@click.pass_context
@handle_exceptions
def remove(ctx, key):
    """Remove a secret from the project's secret store."""
    store = open_store(ctx.obj)
    if not store.remove(key):
        logger.warning(f"Cannot find '{key}' in the secret store.")
        return
    store.save()
    logger.success(f"Removed '{key}' from the secret store.")
