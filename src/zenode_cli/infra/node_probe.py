"""Node reachability detection.

Provides a structured result describing whether the configured node
endpoint answers HTTP requests.  Used by the ``doctor`` command; the
operations themselves never probe first.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from zenode_cli.config import Settings


@dataclass(frozen=True, slots=True)
class NodeStatus:
    """Result of probing the node endpoint."""

    reachable: bool
    """``True`` if the endpoint returned any HTTP response."""

    endpoint: str
    """The URL that was probed."""

    detail: str
    """Status code or the transport error, for display."""


def probe_node(
    settings: Settings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> NodeStatus:
    """Send one ``GET`` to ``settings.endpoint``.

    Any HTTP status counts as reachable — a GraphQL or JSON endpoint may
    reject ``GET`` and still be alive.
    """
    endpoint = settings.endpoint
    try:
        with httpx.Client(
            timeout=httpx.Timeout(settings.timeout_seconds),
            transport=transport,
        ) as client:
            response = client.get(endpoint)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return NodeStatus(reachable=False, endpoint=endpoint, detail=str(exc) or type(exc).__name__)
    return NodeStatus(
        reachable=True,
        endpoint=endpoint,
        detail=f"HTTP {response.status_code}",
    )
