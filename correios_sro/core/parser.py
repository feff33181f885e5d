"""
core/parser.py
---------------

Deserialization of SRO answers.

The SOAP body is parsed with ``lxml`` and the ``<return>`` element is
turned into plain dictionaries, which are then validated by the
:class:`~correios_sro.schemas.tracking.TrackingResponse` model.  There
is no best-effort recovery: a body that is not XML, has no ``return``
element or does not fit the model raises
:class:`~correios_sro.errors.SRODeserializationError`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple

from lxml import etree
from pydantic import ValidationError

from correios_sro.core.envelope import SOAPENV_NS
from correios_sro.errors import SRODeserializationError, SROSoapFaultError
from correios_sro.logging_config import log_call, logger
from correios_sro.schemas.tracking import TrackingResponse

# Repeated child elements and the list field they are collected into.
REPEATED_ELEMENTS: Dict[str, str] = {
    "objeto": "objetos",
    "evento": "eventos",
}


def _parse_xml(content: bytes) -> etree._Element:
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
    return etree.fromstring(content, parser=parser)


def _localname(el: etree._Element) -> str:
    return etree.QName(el).localname


def element_to_dict(el: etree._Element) -> Dict[str, Any]:
    """Convert an element's children into a dictionary.

    Leaves become stripped text (``None`` when empty), elements listed in
    :data:`REPEATED_ELEMENTS` are collected into lists and any other
    element with children becomes a nested dictionary.
    """
    out: Dict[str, Any] = {}
    for child in el.iterchildren(tag=etree.Element):
        name = _localname(child)
        if len(child):
            value: Any = element_to_dict(child)
        else:
            value = (child.text or "").strip() or None
        if name in REPEATED_ELEMENTS:
            out.setdefault(REPEATED_ELEMENTS[name], []).append(value if isinstance(value, dict) else {})
        else:
            out[name] = value
    return out


def extract_soap_fault(content: bytes) -> Optional[Tuple[str, str]]:
    """Return ``(faultcode, faultstring)`` if ``content`` is a SOAP fault."""
    try:
        root = _parse_xml(content)
    except (etree.XMLSyntaxError, ValueError):
        return None
    fault = root.find(f".//{{{SOAPENV_NS}}}Fault")
    if fault is None:
        return None
    code = (fault.findtext("faultcode") or "").strip()
    message = (fault.findtext("faultstring") or "").strip()
    return code, message


def _fail(message: str, content: bytes) -> SRODeserializationError:
    logger.error(json.dumps({
        "event": "sro_deserialization_error",
        "detail": message,
        "body_size": len(content),
    }))
    return SRODeserializationError(message, body=content)


@log_call
def parse_response(content: bytes, status_code: Optional[int] = None) -> TrackingResponse:
    """Parse the body of a successful SRO call.

    :param content: raw response body
    :param status_code: HTTP status of the answer, attached to a SOAP fault
    :raises SROSoapFaultError: if the body is a SOAP fault
    :raises SRODeserializationError: if the body is not a valid SRO answer
    :return: the deserialized :class:`TrackingResponse`
    """
    try:
        root = _parse_xml(content)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise _fail(f"Malformed XML in SRO response: {exc}", content) from exc

    body = root.find(f"{{{SOAPENV_NS}}}Body")
    if body is None:
        raise _fail("No SOAP Body element found in SRO response", content)

    fault = body.find(f"{{{SOAPENV_NS}}}Fault")
    if fault is not None:
        raise SROSoapFaultError(
            (fault.findtext("faultcode") or "").strip(),
            (fault.findtext("faultstring") or "").strip(),
            status_code=status_code,
            body=content,
        )

    result = body.find(".//{*}return")
    if result is None:
        raise _fail("No return element found in SRO response", content)

    try:
        return TrackingResponse.model_validate(element_to_dict(result))
    except ValidationError as exc:
        raise _fail(f"Unexpected SRO response structure: {exc}", content) from exc
