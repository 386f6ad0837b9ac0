"""Exceptions raised by the docsite build."""


class DocsiteError(Exception):
    """Base class for all docsite errors."""


class ConfigError(DocsiteError):
    """The site configuration file is missing required data or malformed."""


class ContentError(DocsiteError):
    """A content file could not be read."""
