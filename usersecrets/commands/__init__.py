from .id import id_command
from .list_secrets import list_secrets
from .set_secret import set_secret
from .remove import remove
from .clear import clear
from .config import config
from .log import log
from .version import version

__all__ = [
    "id_command",
    "list_secrets",
    "set_secret",
    "remove",
    "clear",
    "config",
    "log",
    "version",
]
