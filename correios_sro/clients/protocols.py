"""
clients/protocols.py
--------------------

Structural contracts for the HTTP collaborator used by
:class:`~correios_sro.client.CorreiosSRO`.

The client only needs to POST a raw body with a set of headers and get
back the status code and body of the answer.  ``httpx.Client`` and
``httpx.AsyncClient`` satisfy these protocols as they are, as do the
wrappers in :mod:`correios_sro.clients.http_client` and any test
double exposing the same ``post`` signature.
"""

from __future__ import annotations

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class HTTPResponseProtocol(Protocol):
    status_code: int

    @property
    def content(self) -> bytes:
        ...


@runtime_checkable
class SyncHTTPClientProtocol(Protocol):
    """Blocking POST capability."""

    def post(self, url: str, *, headers: Dict[str, str], content: bytes) -> HTTPResponseProtocol:
        ...


@runtime_checkable
class AsyncHTTPClientProtocol(Protocol):
    """Non-blocking POST capability; ``post`` is a coroutine."""

    async def post(self, url: str, *, headers: Dict[str, str], content: bytes) -> HTTPResponseProtocol:
        ...
