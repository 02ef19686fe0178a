"""Run the command-line tools from another program.

A server listing folders shells out to `iconfetcher` for thumbnails and
to `resolve-alias` to follow Finder aliases; these helpers wrap those
calls and turn failures into exceptions.
"""
import base64
import binascii
import logging
import os
import subprocess

from finder_tools.config import ICONFETCHER_EXECUTABLE, RESOLVE_ALIAS_EXECUTABLE
from finder_tools.errors import AliasError, IconError

logger = logging.getLogger(__name__)


def get_icon_base64(path, size=None, executable=ICONFETCHER_EXECUTABLE):
    command = [executable, path]
    if size is not None:
        command.append(str(size))

    try:
        result = subprocess.run(command, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        detail = exc.stderr.strip() or f"exit status {exc.returncode}"
        raise IconError(f"failed to get icon for {path}: {detail}") from exc
    except OSError as exc:
        raise IconError(f"failed to get icon for {path}: {exc}") from exc

    return result.stdout.strip()


def get_icon_png(path, size=None, executable=ICONFETCHER_EXECUTABLE):
    encoded = get_icon_base64(path, size, executable)
    try:
        return base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise IconError(f"invalid base64 icon data for {path}: {exc}") from exc


def save_icon(path, output_path, size=None, executable=ICONFETCHER_EXECUTABLE):
    png = get_icon_png(path, size, executable)
    with open(output_path, "wb") as f:
        f.write(png)
    logger.info("saved icon for %s as %s", path, output_path)
    return output_path


def resolve_alias_path(path, executable=RESOLVE_ALIAS_EXECUTABLE):
    try:
        result = subprocess.run([executable, path], capture_output=True, text=True)
    except OSError as exc:
        raise AliasError(f"Error: {exc}") from exc

    if result.returncode != 0:
        # the tool already prefixes its message with "Error:"
        detail = result.stderr.strip() or f"Error: exit status {result.returncode}"
        raise AliasError(detail)

    resolved = result.stdout.strip()
    logger.debug("alias %s -> %s", path, resolved)
    return resolved


def is_inside(path, folder):
    """True when `path` lies in `folder` (used to map alias targets back to shared folders)."""
    folder = os.path.abspath(folder)
    path = os.path.abspath(path)
    return os.path.commonpath([folder, path]) == folder
