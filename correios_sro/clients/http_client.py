"""
clients/http_client.py
----------------------

Default HTTP collaborators built on ``httpx``.

:class:`HTTPClient` wraps ``httpx.Client`` for the blocking queries and
:class:`AsyncHTTPClient` wraps ``httpx.AsyncClient`` for the
non-blocking ones.  Both use connection pooling, log every outbound
request through :func:`~correios_sro.logging_config.log_http_request`
and honour the settings defined in :mod:`correios_sro.core.config`.

There are no retries: each request is sent once and any ``httpx``
error is logged and propagated immediately.  Timeouts are whatever
``httpx`` uses unless ``SRO_HTTP_TIMEOUT`` is set.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx

from correios_sro.core.config import Settings, get_settings
from correios_sro.logging_config import log_http_request, logger


def client_options(settings: Settings) -> Dict[str, Any]:
    """Keyword arguments shared by the sync and async ``httpx`` clients."""
    options: Dict[str, Any] = {}
    if settings.http_timeout is not None:
        options["timeout"] = httpx.Timeout(settings.http_timeout)
    if settings.user_agent:
        options["headers"] = {"User-Agent": settings.user_agent}
    return options


def _log_failure(method: str, url: str, exc: Exception, start_time: float) -> None:
    logger.error(json.dumps({
        "event": "http_error",
        "method": method,
        "url": url,
        "detail": str(exc),
    }), exc_info=True)
    log_http_request(method, url, duration_ms=(time.time() - start_time) * 1000)


class HTTPClient:
    """Blocking HTTP client used by the synchronous SRO queries.

    Instances may be shared across many queries and should be closed
    with :meth:`close` (or used as a context manager) when no longer
    needed.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or get_settings()
        self._client = httpx.Client(**client_options(settings))

    def close(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Perform a single HTTP request.

        Network errors are logged and re-raised unchanged.
        """
        method = method.upper()
        start_time = time.time()
        log_http_request(method, url, headers=kwargs.get("headers"), body_size=len(kwargs.get("content") or b""))
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            _log_failure(method, url, exc, start_time)
            raise
        log_http_request(method, url, status=response.status_code, duration_ms=(time.time() - start_time) * 1000)
        return response

    def post(self, url: str, *, headers: Dict[str, str], content: bytes) -> httpx.Response:
        return self.request("POST", url, headers=headers, content=content)


class AsyncHTTPClient:
    """Non-blocking counterpart of :class:`HTTPClient`.

    Must be closed with :meth:`aclose` (or used as an async context
    manager) from within the event loop that used it.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or get_settings()
        self._client = httpx.AsyncClient(**client_options(settings))

    async def aclose(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        method = method.upper()
        start_time = time.time()
        log_http_request(method, url, headers=kwargs.get("headers"), body_size=len(kwargs.get("content") or b""))
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            _log_failure(method, url, exc, start_time)
            raise
        log_http_request(method, url, status=response.status_code, duration_ms=(time.time() - start_time) * 1000)
        return response

    async def post(self, url: str, *, headers: Dict[str, str], content: bytes) -> httpx.Response:
        return await self.request("POST", url, headers=headers, content=content)
