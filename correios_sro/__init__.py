"""
correios_sro
------------

Client for the Correios SRO (Sistema de Rastreamento de Objetos)
SOAP tracking service.  Importing the package exposes the
:class:`CorreiosSRO` client, its configuration enumerations, the
response models and the error hierarchy.
"""

from .client import CorreiosSRO
from .errors import SRODeserializationError, SROError, SROSoapFaultError, SROTransportError
from .schemas import (
    Credentials,
    EventLocation,
    Language,
    QueryParameters,
    QueryType,
    ResultScope,
    TrackedObject,
    TrackingEvent,
    TrackingResponse,
)

__all__ = [
    "CorreiosSRO",
    "Credentials",
    "EventLocation",
    "Language",
    "QueryParameters",
    "QueryType",
    "ResultScope",
    "SRODeserializationError",
    "SROError",
    "SROSoapFaultError",
    "SROTransportError",
    "TrackedObject",
    "TrackingEvent",
    "TrackingResponse",
]
