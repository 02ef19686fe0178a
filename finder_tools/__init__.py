"""Small macOS Finder helpers: file icons as base64 PNG, alias resolution."""

__version__ = "0.1.0"
