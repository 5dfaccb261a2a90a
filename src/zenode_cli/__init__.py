"""zenode-cli — command-line client for schemas and instances.

Parses ``key:value`` field tuples, routes them to one of four document
store operations and renders the resulting identifiers.
"""

from zenode_cli.version import __version__

__all__: list[str] = ["__version__"]
