import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the usersecrets tool."""
    try:
        ver = importlib.metadata.version("usersecrets")
        click.echo(f"usersecrets version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of usersecrets. Is it installed correctly?")
