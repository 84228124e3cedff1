import functools
import click
import sys # Import sys for sys.exc_info()
from .cli_logger import logger
from .errors import UserSecretsError

def handle_exceptions(func):
    """A decorator to turn failures of CLI commands into a logged error and exit status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("Command aborted by user.")
            sys.exit(1)
        except UserSecretsError as e:
            logger.error(str(e))
            sys.exit(1)
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except click.ClickException:
            raise
        except Exception as e:
            logger.error(f"An unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
