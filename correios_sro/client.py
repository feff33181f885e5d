"""
client.py
---------

:class:`CorreiosSRO` groups the calls to the Correios SRO tracking
service.

Usage follows a configure-then-call pattern::

    sro = CorreiosSRO().set_credentials("user", "pass").set_query_parameters(
        QueryType.LIST, ResultScope.LAST, Language.ENGLISH
    )
    resposta = sro.busca_eventos("AA123456789BR")
    resposta = await sro.busca_eventos_lista_async("AA123456789BR")

Every query builds its request from a snapshot of the credentials and
parameters taken when the call starts, so reconfiguring the client
while an async query is in flight does not change what that query
sends.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from correios_sro.clients.http_client import AsyncHTTPClient, HTTPClient
from correios_sro.clients.protocols import (
    AsyncHTTPClientProtocol,
    HTTPResponseProtocol,
    SyncHTTPClientProtocol,
)
from correios_sro.core.config import DEFAULT_API_URL, Settings, get_settings
from correios_sro.core.envelope import ACTION_BUSCA_EVENTOS, ACTION_BUSCA_EVENTOS_LISTA
from correios_sro.core.parser import extract_soap_fault, parse_response
from correios_sro.core.request import SRORequest, build_request
from correios_sro.errors import SROSoapFaultError, SROTransportError
from correios_sro.logging_config import logger
from correios_sro.schemas.parameters import Credentials, Language, QueryParameters, QueryType, ResultScope
from correios_sro.schemas.tracking import TrackingResponse


class CorreiosSRO:
    """Client of the SRO ``rastro`` SOAP service.

    Query parameters default to list query, all events, Portuguese.
    Credentials default to empty strings; they can be given here or
    later through :meth:`set_credentials`.

    :param usuario: SRO user
    :param senha: SRO password
    :param http_client: blocking collaborator; an :class:`HTTPClient` is
        created on first use when omitted
    :param async_http_client: non-blocking collaborator; when omitted each
        async query opens and closes its own :class:`AsyncHTTPClient`, so the
        client can be reused across event loops
    :param settings: library settings; :func:`get_settings` when omitted
    :param api_url: SRO endpoint; only meant for pointing tests at a local
        server, never read from the environment
    """

    def __init__(
        self,
        usuario: Optional[str] = None,
        senha: Optional[str] = None,
        *,
        http_client: Optional[SyncHTTPClientProtocol] = None,
        async_http_client: Optional[AsyncHTTPClientProtocol] = None,
        settings: Optional[Settings] = None,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._settings = settings or get_settings()
        self._api_url = api_url
        self._credentials = Credentials()
        self._http_client = http_client
        self._async_http_client = async_http_client
        self._owns_http_client = http_client is None
        self.set_query_parameters(QueryType.LIST, ResultScope.ALL, Language.PORTUGUESE)
        if usuario is not None or senha is not None:
            self.set_credentials(usuario or "", senha or "")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def usuario(self) -> str:
        return self._credentials.usuario

    @property
    def senha(self) -> str:
        return self._credentials.senha

    @property
    def tipo(self) -> QueryType:
        return self._parameters.tipo

    @property
    def resultado(self) -> ResultScope:
        return self._parameters.resultado

    @property
    def lingua(self) -> Language:
        return self._parameters.lingua

    def set_credentials(self, usuario: str, senha: str) -> "CorreiosSRO":
        """Replace the SRO credentials and return this same client."""
        self._credentials = Credentials.model_construct(usuario=usuario, senha=senha)
        return self

    def set_query_parameters(self, tipo: QueryType, resultado: ResultScope, lingua: Language) -> "CorreiosSRO":
        """Replace the query parameters and return this same client."""
        self._parameters = QueryParameters.model_construct(tipo=tipo, resultado=resultado, lingua=lingua)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def busca_eventos(self, codigo: str) -> TrackingResponse:
        """Run ``buscaEventos`` for ``codigo`` and wait for the answer."""
        return self._do_request(ACTION_BUSCA_EVENTOS, codigo)

    async def busca_eventos_async(self, codigo: str) -> TrackingResponse:
        """Run ``buscaEventos`` for ``codigo`` without blocking the event loop."""
        return await self._do_request_async(ACTION_BUSCA_EVENTOS, codigo)

    def busca_eventos_lista(self, codigo: str) -> TrackingResponse:
        """Run ``buscaEventosLista`` for ``codigo`` and wait for the answer."""
        return self._do_request(ACTION_BUSCA_EVENTOS_LISTA, codigo)

    async def busca_eventos_lista_async(self, codigo: str) -> TrackingResponse:
        """Run ``buscaEventosLista`` for ``codigo`` without blocking the event loop."""
        return await self._do_request_async(ACTION_BUSCA_EVENTOS_LISTA, codigo)

    def prepare_request(self, action: str, codigo: str) -> SRORequest:
        """Prepare the request for ``action`` from the current configuration."""
        logger.debug(json.dumps({
            "event": "sro_request",
            "action": action,
            "codigo": codigo,
        }))
        return build_request(
            self._api_url,
            action,
            codigo,
            self._credentials.model_copy(),
            self._parameters.model_copy(),
        )

    def _do_request(self, action: str, codigo: str) -> TrackingResponse:
        request = self.prepare_request(action, codigo)
        if self._http_client is None:
            self._http_client = HTTPClient(self._settings)
        try:
            response = self._http_client.post(request.url, headers=request.headers, content=request.content)
        except httpx.HTTPError as exc:
            raise SROTransportError(f"SRO request failed: {exc}") from exc
        return self._handle_response(response)

    async def _do_request_async(self, action: str, codigo: str) -> TrackingResponse:
        request = self.prepare_request(action, codigo)
        try:
            if self._async_http_client is not None:
                response = await self._async_http_client.post(
                    request.url, headers=request.headers, content=request.content
                )
            else:
                # A pool is bound to the event loop that opened it.
                async with AsyncHTTPClient(self._settings) as client:
                    response = await client.post(request.url, headers=request.headers, content=request.content)
        except httpx.HTTPError as exc:
            raise SROTransportError(f"SRO request failed: {exc}") from exc
        return self._handle_response(response)

    def _handle_response(self, response: HTTPResponseProtocol) -> TrackingResponse:
        content = response.content
        if not (200 <= response.status_code < 300):
            fault = extract_soap_fault(content)
            if fault is not None:
                logger.warning(json.dumps({
                    "event": "sro_soap_fault",
                    "status_code": response.status_code,
                    "faultcode": fault[0],
                    "faultstring": fault[1],
                }))
                raise SROSoapFaultError(fault[0], fault[1], status_code=response.status_code, body=content)
            raise SROTransportError(
                f"SRO answered HTTP {response.status_code}",
                status_code=response.status_code,
                body=content,
            )
        return parse_response(content, status_code=response.status_code)

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Close the blocking HTTP client if this instance created it."""
        if self._owns_http_client and isinstance(self._http_client, HTTPClient):
            self._http_client.close()
            self._http_client = None

    async def aclose(self) -> None:
        """Same as :meth:`close`.

        Async queries without an injected collaborator close their own
        client before returning, so only the blocking one is left.
        """
        self.close()

    def __enter__(self) -> "CorreiosSRO":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "CorreiosSRO":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
