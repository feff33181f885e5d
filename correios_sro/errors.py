"""
errors.py
---------

Exception hierarchy raised by the SRO client.

Configuration never raises: credentials and query parameters are sent
to the remote service as they are.  Only the two failure points of a
query produce errors: the HTTP round trip and the decoding of the XML
answer.
"""

from __future__ import annotations

from typing import Optional


class SROError(Exception):
    """Base class for every error raised by :mod:`correios_sro`."""


class SROTransportError(SROError):
    """The request could not be completed or the service answered non‑2xx.

    ``status_code`` is ``None`` when no response was received at all
    (connection refused, timeout, DNS failure).  In that case the
    original ``httpx`` exception is available as ``__cause__``.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SROSoapFaultError(SROTransportError):
    """A non‑2xx response carrying a SOAP ``Fault`` element."""

    def __init__(self, faultcode: str, faultstring: str, *, status_code: Optional[int] = None,
                 body: bytes = b"") -> None:
        super().__init__(f"SOAP Fault [{faultcode}]: {faultstring}", status_code=status_code, body=body)
        self.faultcode = faultcode
        self.faultstring = faultstring


class SRODeserializationError(SROError):
    """The response body is not a well-formed SRO answer."""

    def __init__(self, message: str, *, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body
