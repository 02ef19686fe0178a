import logging
import os

DEFAULT_ICON_SIZE = 32

ICONFETCHER_USAGE = f"Usage: iconfetcher <path> [size]  (default size: {DEFAULT_ICON_SIZE})"
RESOLVE_ALIAS_USAGE = "Usage: resolve-alias <alias-file>"
ICON_FAILURE_MESSAGE = "Failed to get icon"

ICONFETCHER_EXECUTABLE = "iconfetcher"
RESOLVE_ALIAS_EXECUTABLE = "resolve-alias"

LOG_LEVEL_ENV = "FINDER_TOOLS_LOG_LEVEL"
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def log_level(environ=None):
    environ = os.environ if environ is None else environ
    name = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    # getLevelName returns "Level X" for unknown names
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging(environ=None):
    logging.basicConfig(level=log_level(environ), format=LOG_FORMAT)
