import click
from ..decorators import handle_exceptions
from .common import resolve_user_secrets_id

@click.command(name="id")
@click.pass_context
@handle_exceptions
def id_command(ctx):
    """Print the UserSecretsId of the project."""
    click.echo(resolve_user_secrets_id(ctx.obj))
