"""
Pydantic models and enumerations exchanged with the SRO service.
"""

from .parameters import Credentials, Language, QueryParameters, QueryType, ResultScope
from .tracking import EventLocation, TrackedObject, TrackingEvent, TrackingResponse

__all__ = [
    "Credentials",
    "EventLocation",
    "Language",
    "QueryParameters",
    "QueryType",
    "ResultScope",
    "TrackedObject",
    "TrackingEvent",
    "TrackingResponse",
]
