class FinderToolsError(Exception):
    pass


class IconError(FinderToolsError):
    pass


class AliasError(FinderToolsError):
    pass


class CapabilityUnavailable(FinderToolsError):
    """Raised when the Cocoa frameworks cannot be loaded on this host."""
