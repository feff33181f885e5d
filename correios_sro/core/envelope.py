"""
core/envelope.py
-----------------

SOAP envelope construction for the SRO ``rastro`` service.

The envelope is built with ``lxml`` so that namespace prefixes and
text escaping are handled by the XML library instead of string
templates.  Everything here is pure: the same action, tracking code,
credentials and parameters always produce the same document, and no
network access takes place.

Example of the produced document (whitespace added)::

    <soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/"
                      xmlns:res="http://resource.webservice.correios.com.br/">
      <soapenv:Header/>
      <soapenv:Body>
        <res:buscaEventos>
          <usuario>...</usuario>
          <senha>...</senha>
          <tipo>L</tipo>
          <resultado>T</resultado>
          <lingua>101</lingua>
          <objetos>AA123456789BR</objetos>
        </res:buscaEventos>
      </soapenv:Body>
    </soapenv:Envelope>
"""

from __future__ import annotations

from typing import Any, Dict

from lxml import etree

from correios_sro.schemas.parameters import Credentials, Language, QueryParameters, QueryType, ResultScope

SOAPENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
RES_NS = "http://resource.webservice.correios.com.br/"
NSMAP = {"soapenv": SOAPENV_NS, "res": RES_NS}

ACTION_BUSCA_EVENTOS = "buscaEventos"
ACTION_BUSCA_EVENTOS_LISTA = "buscaEventosLista"

DEFAULT_QUERY_TYPE_TOKEN = "L"
DEFAULT_RESULT_SCOPE_TOKEN = "T"
DEFAULT_LANGUAGE_TOKEN = "101"

_QUERY_TYPE_TOKENS: Dict[QueryType, str] = {
    QueryType.LIST: "L",
}

_RESULT_SCOPE_TOKENS: Dict[ResultScope, str] = {
    ResultScope.ALL: "T",
    ResultScope.LAST: "U",
    ResultScope.FIRST: "P",
}

_LANGUAGE_TOKENS: Dict[Language, str] = {
    Language.PORTUGUESE: "101",
    Language.ENGLISH: "102",
    Language.SPANISH: "103",
}


def _token(tokens: Dict[Any, str], value: Any, default: str) -> str:
    try:
        return tokens.get(value, default)
    except TypeError:
        # unhashable
        return default


def query_type_token(tipo: Any) -> str:
    """Return the ``tipo`` token; unknown values fall back to ``"L"``."""
    return _token(_QUERY_TYPE_TOKENS, tipo, DEFAULT_QUERY_TYPE_TOKEN)


def result_scope_token(resultado: Any) -> str:
    """Return the ``resultado`` token; unknown values fall back to ``"T"``."""
    return _token(_RESULT_SCOPE_TOKENS, resultado, DEFAULT_RESULT_SCOPE_TOKEN)


def language_token(lingua: Any) -> str:
    """Return the ``lingua`` token; unknown values fall back to ``"101"``."""
    return _token(_LANGUAGE_TOKENS, lingua, DEFAULT_LANGUAGE_TOKEN)


def build_envelope(
    action: str,
    codigo: str,
    credentials: Credentials,
    parameters: QueryParameters,
) -> etree._Element:
    """Build the SOAP envelope for an SRO action.

    Parameters
    ----------
    action : str
        ``"buscaEventos"`` or ``"buscaEventosLista"``; becomes the name of
        the element inside ``Body``.
    codigo : str
        Tracking code(s), sent verbatim in ``objetos``.
    credentials : Credentials
        SRO user and password.
    parameters : QueryParameters
        Query type, result scope and language.

    Returns
    -------
    lxml.etree._Element
        The ``Envelope`` root element.
    """
    root = etree.Element(etree.QName(SOAPENV_NS, "Envelope"), nsmap=NSMAP)
    etree.SubElement(root, etree.QName(SOAPENV_NS, "Header"))
    body = etree.SubElement(root, etree.QName(SOAPENV_NS, "Body"))
    call = etree.SubElement(body, etree.QName(RES_NS, action))

    fields = (
        ("usuario", credentials.usuario),
        ("senha", credentials.senha),
        ("tipo", query_type_token(parameters.tipo)),
        ("resultado", result_scope_token(parameters.resultado)),
        ("lingua", language_token(parameters.lingua)),
        ("objetos", codigo),
    )
    for tag, text in fields:
        etree.SubElement(call, tag).text = text
    return root


def serialize_envelope(root: etree._Element) -> str:
    """Serialise an envelope without XML declaration."""
    return etree.tostring(root, encoding="unicode")
