import click
import os
import json
from .. import config as config_module
from ..cli_logger import logger

NO_CONFIG = "Error: No usersecrets.toml found in the working directory."

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the usersecrets.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Print the contents of usersecrets.toml."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not os.path.exists(config_file_path):
        logger.error(NO_CONFIG)
        return
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading usersecrets.toml at {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command(name="list")
@click.pass_context
def list_keys(ctx):
    """List all configuration keys and values as JSON."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG)
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a dotted KEY, e.g. resolver.configuration."""
    conf = config_module.load_config(path=ctx.obj["path"])
    value = conf
    try:
        for k in key.split('.'):
            value = value[k]
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in usersecrets.toml")

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a dotted KEY, creating usersecrets.toml if needed."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a dotted KEY from usersecrets.toml."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in usersecrets.toml")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
