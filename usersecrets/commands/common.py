from .. import config as config_module
from ..cli_logger import logger
from ..project_id_resolver import ProjectIdResolver
from ..secrets_store import SecretsStore

def resolve_user_secrets_id(ctx_obj):
    """--id short-circuits; otherwise MSBuild is asked for the project's UserSecretsId."""
    if ctx_obj.get("id"):
        return ctx_obj["id"]

    path = ctx_obj.get("path", ".")
    conf = config_module.load_config(path=path)
    configuration = config_module.resolver_setting(conf, "configuration", ctx_obj.get("configuration"))
    muxer_path = config_module.resolver_setting(conf, "dotnet_path")

    resolver = ProjectIdResolver(logger, path, muxer_path=muxer_path)
    return resolver.resolve(ctx_obj.get("project"), configuration)

def open_store(ctx_obj):
    return SecretsStore(resolve_user_secrets_id(ctx_obj))
