"""Cocoa-backed capabilities used by the command-line tools.

Both classes import PyObjC lazily so the rest of the package can be
imported, and tested with fakes, on hosts without AppKit.
"""
import importlib
import logging
import os
from collections import namedtuple

from finder_tools.errors import AliasError, CapabilityUnavailable, IconError

logger = logging.getLogger(__name__)

Resolution = namedtuple("Resolution", ["path", "stale"])


def _framework(name):
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise CapabilityUnavailable(f"{name} framework is not available: {exc}") from exc


class Workspace:
    def icon_data(self, path):
        """Return the TIFF representation of the Finder icon for `path`.

        NSWorkspace hands back a generic icon for paths that do not exist,
        so no existence check is made here.
        """
        appkit = _framework("AppKit")
        objc = _framework("objc")
        full_path = os.path.abspath(path)
        try:
            icon = appkit.NSWorkspace.sharedWorkspace().iconForFile_(full_path)
            if icon is None:
                return None
            tiff = icon.TIFFRepresentation()
        except objc.error as exc:
            raise IconError(f"could not load icon for {path}: {exc}") from exc
        if tiff is None:
            return None
        return bytes(tiff)


class BookmarkResolver:
    def resolve(self, path):
        foundation = _framework("Foundation")
        url = foundation.NSURL.fileURLWithPath_(os.path.abspath(path))

        data, error = foundation.NSURL.bookmarkDataWithContentsOfURL_error_(url, None)
        if data is None:
            raise AliasError(_describe(error, f"could not read bookmark data from {path}"))

        options = (
            foundation.NSURLBookmarkResolutionWithoutUI
            | foundation.NSURLBookmarkResolutionWithoutMounting
        )
        resolved, stale, error = (
            foundation.NSURL.URLByResolvingBookmarkData_options_relativeToURL_bookmarkDataIsStale_error_(
                data, options, None, None, None
            )
        )
        if resolved is None:
            raise AliasError(_describe(error, f"could not resolve bookmark {path}"))

        logger.debug("resolved %s -> %s (stale=%s)", path, resolved.path(), bool(stale))
        return Resolution(str(resolved.path()), bool(stale))


def _describe(error, fallback):
    if error is None:
        return fallback
    return str(error.localizedDescription())
