"""
schemas/tracking.py
--------------------

Pydantic models for the SRO answer.  The structure mirrors the
``<return>`` element of ``buscaEventosResponse`` and
``buscaEventosListaResponse``: one ``objeto`` per tracking code, each
with zero or more ``evento`` entries.  Every leaf is optional text and
unknown elements are ignored, so a new field added by Correios does
not break existing callers.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventLocation(BaseModel):
    """Destination unit of a forwarding event (``destino``)."""

    model_config = ConfigDict(extra="ignore")

    local: Optional[str] = None
    codigo: Optional[str] = None
    cidade: Optional[str] = None
    bairro: Optional[str] = None
    uf: Optional[str] = None


class TrackingEvent(BaseModel):
    """A single tracking event (``evento``)."""

    model_config = ConfigDict(extra="ignore")

    tipo: Optional[str] = None
    status: Optional[str] = None
    data: Optional[str] = None
    hora: Optional[str] = None
    descricao: Optional[str] = None
    detalhe: Optional[str] = None
    local: Optional[str] = None
    codigo: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    destino: Optional[EventLocation] = None


class TrackedObject(BaseModel):
    """One tracked object (``objeto``).

    ``erro`` is filled by the service for codes it does not know; it is
    part of the answer, not a failure of the request.
    """

    model_config = ConfigDict(extra="ignore")

    numero: Optional[str] = None
    sigla: Optional[str] = None
    nome: Optional[str] = None
    categoria: Optional[str] = None
    erro: Optional[str] = None
    eventos: List[TrackingEvent] = Field(default_factory=list)


class TrackingResponse(BaseModel):
    """Deserialized SRO answer."""

    model_config = ConfigDict(extra="ignore")

    versao: Optional[str] = None
    qtd: Optional[int] = None
    objetos: List[TrackedObject] = Field(default_factory=list)
