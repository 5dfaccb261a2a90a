"""Infrastructure layer — external system integration.

This layer wraps all interaction with the node over HTTP.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~zenode_cli.exceptions.ZenodeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from zenode_cli.infra.http_operator import HttpOperator
from zenode_cli.infra.node_probe import NodeStatus, probe_node

__all__: list[str] = [
    "HttpOperator",
    "NodeStatus",
    "probe_node",
]
