import click
from . import config as config_module
from .cli_logger import logger
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Working directory used to search for the project.")
@click.option("--project", default=None, help="Path to the project file or its directory.")
@click.option("--configuration", "-c", default=None, help="The project configuration to use. Defaults to 'Debug'.")
@click.option("--id", "user_secrets_id", default=None, help="The user secret ID to use instead of the project's.")
@click.option("--verbose", "-v", is_flag=True, help="Show verbose output.")
@click.pass_context
def cli(ctx, path, project, configuration, user_secrets_id, verbose):
    """Manage user secrets for an MSBuild project."""
    conf = config_module.load_config(path=path)
    verbose_setting = config_module.resolver_setting(conf, "verbose", default=False)
    if isinstance(verbose_setting, str):
        verbose_setting = verbose_setting.lower() in ("1", "true", "yes")
    logger.verbose_enabled = verbose or bool(verbose_setting)
    ctx.obj = {
        "path": path,
        "project": project,
        "configuration": configuration,
        "id": user_secrets_id,
    }

cli.add_command(id_command)
cli.add_command(list_secrets)
cli.add_command(set_secret)
cli.add_command(remove)
cli.add_command(clear)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
