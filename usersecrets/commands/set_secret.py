import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from .common import open_store

@click.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
@handle_exceptions
def set_secret(ctx, key, value):
    """Set a secret, overwriting any existing value for KEY."""
    store = open_store(ctx.obj)
    store.set(key, value)
    store.save()
    logger.success(f"Successfully saved {key} = {value} to the secret store.")
