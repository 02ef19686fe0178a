"""Print the path an alias (bookmark) file points to.

    resolve-alias <alias-file>
"""
import logging
import sys

from finder_tools.config import RESOLVE_ALIAS_USAGE, configure_logging
from finder_tools.errors import FinderToolsError
from finder_tools.macos import BookmarkResolver

logger = logging.getLogger(__name__)


def resolve_alias(path, resolver=None):
    resolver = resolver or BookmarkResolver()
    return resolver.resolve(path)


def main(argv=None, resolver=None):
    args = sys.argv[1:] if argv is None else list(argv)
    configure_logging()

    # Exactly one argument; the usage line goes to stdout
    if len(args) != 1:
        print(RESOLVE_ALIAS_USAGE)
        return 1

    alias_path = args[0]
    try:
        resolution = resolve_alias(alias_path, resolver)
    except FinderToolsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if resolution.stale:
        logger.warning("bookmark data is stale: %s", alias_path)

    print(resolution.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
