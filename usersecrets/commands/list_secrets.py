import click
import json
from ..decorators import handle_exceptions
from .common import open_store

@click.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Print the secrets as a JSON object.")
@click.pass_context
@handle_exceptions
def list_secrets(ctx, as_json):
    """List all secrets stored for the project."""
    store = open_store(ctx.obj)
    if as_json:
        click.echo(json.dumps(dict(store.items()), indent=2))
        return
    if not len(store):
        click.echo("No secrets configured for this application.")
        return
    for key, value in store.items():
        click.echo(f"{key} = {value}")
