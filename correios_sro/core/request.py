"""
core/request.py
----------------

Construction of the HTTP request sent to SRO.

Both the blocking and the non-blocking query paths go through
:func:`build_request`, so for the same client state and tracking code
they send byte-identical payloads.  Only the dispatch differs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from correios_sro.core.envelope import build_envelope, serialize_envelope
from correios_sro.schemas.parameters import Credentials, QueryParameters

SOAP_CONTENT_TYPE = "text/xml"


def build_soap_headers() -> Dict[str, str]:
    """Return the fixed headers of every SRO call."""
    return {
        "Content-Type": SOAP_CONTENT_TYPE,
        "Accept": SOAP_CONTENT_TYPE,
    }


@dataclass(frozen=True)
class SRORequest:
    """A fully prepared POST to the SRO endpoint."""

    url: str
    action: str
    codigo: str
    content: bytes = field(repr=False)
    headers: Dict[str, str] = field(default_factory=build_soap_headers)


def build_request(
    url: str,
    action: str,
    codigo: str,
    credentials: Credentials,
    parameters: QueryParameters,
) -> SRORequest:
    """Build the envelope for ``action`` and wrap it in an :class:`SRORequest`."""
    envelope = build_envelope(action, codigo, credentials, parameters)
    return SRORequest(
        url=url,
        action=action,
        codigo=codigo,
        content=serialize_envelope(envelope).encode("utf-8"),
    )
