"""
HTTP collaborators for the SRO client.

The protocols describe what :class:`~correios_sro.client.CorreiosSRO`
needs from a transport; the ``httpx`` wrappers are the defaults it
creates when none is injected.
"""

from .http_client import AsyncHTTPClient, HTTPClient
from .protocols import AsyncHTTPClientProtocol, HTTPResponseProtocol, SyncHTTPClientProtocol

__all__ = [
    "AsyncHTTPClient",
    "AsyncHTTPClientProtocol",
    "HTTPClient",
    "HTTPResponseProtocol",
    "SyncHTTPClientProtocol",
]
