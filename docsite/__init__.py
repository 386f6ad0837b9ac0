"""Build tooling for the multi-language documentation site."""

__version__ = "0.3.0"
