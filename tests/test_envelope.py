"""Tests for SOAP envelope construction and token mapping."""

from __future__ import annotations

import pytest
from lxml import etree

from correios_sro.core.envelope import (
    ACTION_BUSCA_EVENTOS,
    ACTION_BUSCA_EVENTOS_LISTA,
    RES_NS,
    SOAPENV_NS,
    build_envelope,
    language_token,
    query_type_token,
    result_scope_token,
    serialize_envelope,
)
from correios_sro.schemas.parameters import Credentials, Language, QueryParameters, QueryType, ResultScope

CREDENTIALS = Credentials(usuario="user1", senha="pass1")


def _call_element(root: etree._Element) -> etree._Element:
    body = root.find(f"{{{SOAPENV_NS}}}Body")
    assert body is not None
    assert len(body) == 1
    return body[0]


@pytest.mark.parametrize(
    ("value", "token"),
    [(QueryType.LIST, "L")],
)
def test_query_type_tokens(value: QueryType, token: str) -> None:
    assert query_type_token(value) == token


@pytest.mark.parametrize(
    ("value", "token"),
    [(ResultScope.ALL, "T"), (ResultScope.LAST, "U"), (ResultScope.FIRST, "P")],
)
def test_result_scope_tokens(value: ResultScope, token: str) -> None:
    assert result_scope_token(value) == token


@pytest.mark.parametrize(
    ("value", "token"),
    [(Language.PORTUGUESE, "101"), (Language.ENGLISH, "102"), (Language.SPANISH, "103")],
)
def test_language_tokens(value: Language, token: str) -> None:
    assert language_token(value) == token


@pytest.mark.parametrize("unknown", ["bogus", None, 42, ["x"], {"resultado": "T"}])
def test_unknown_values_fall_back_to_default_tokens(unknown: object) -> None:
    assert query_type_token(unknown) == "L"
    assert result_scope_token(unknown) == "T"
    assert language_token(unknown) == "101"


def test_envelope_structure_with_default_parameters() -> None:
    root = build_envelope(ACTION_BUSCA_EVENTOS, "AA123456789BR", CREDENTIALS, QueryParameters())

    assert root.tag == f"{{{SOAPENV_NS}}}Envelope"
    assert root.nsmap == {"soapenv": SOAPENV_NS, "res": RES_NS}
    assert [child.tag for child in root] == [f"{{{SOAPENV_NS}}}Header", f"{{{SOAPENV_NS}}}Body"]
    header = root[0]
    assert len(header) == 0
    assert header.text is None

    call = _call_element(root)
    assert call.tag == f"{{{RES_NS}}}buscaEventos"
    assert [(child.tag, child.text) for child in call] == [
        ("usuario", "user1"),
        ("senha", "pass1"),
        ("tipo", "L"),
        ("resultado", "T"),
        ("lingua", "101"),
        ("objetos", "AA123456789BR"),
    ]


def test_envelope_uses_configured_parameters() -> None:
    parameters = QueryParameters(tipo=QueryType.LIST, resultado=ResultScope.FIRST, lingua=Language.SPANISH)

    call = _call_element(build_envelope(ACTION_BUSCA_EVENTOS, "AA123456789BR", CREDENTIALS, parameters))

    assert call.findtext("resultado") == "P"
    assert call.findtext("lingua") == "103"


def test_envelope_falls_back_on_unmapped_parameters() -> None:
    parameters = QueryParameters.model_construct(tipo="X", resultado="Y", lingua="Z")

    call = _call_element(build_envelope(ACTION_BUSCA_EVENTOS, "AA123456789BR", CREDENTIALS, parameters))

    assert [call.findtext(tag) for tag in ("tipo", "resultado", "lingua")] == ["L", "T", "101"]


def test_list_action_only_changes_the_call_element_name() -> None:
    single = build_envelope(ACTION_BUSCA_EVENTOS, "AA123456789BR", CREDENTIALS, QueryParameters())
    listed = build_envelope(ACTION_BUSCA_EVENTOS_LISTA, "AA123456789BR", CREDENTIALS, QueryParameters())

    single_call = _call_element(single)
    listed_call = _call_element(listed)
    assert listed_call.tag == f"{{{RES_NS}}}buscaEventosLista"
    assert [(c.tag, c.text) for c in single_call] == [(c.tag, c.text) for c in listed_call]

    single_xml = serialize_envelope(single)
    assert serialize_envelope(listed) == single_xml.replace("buscaEventos", "buscaEventosLista")


def test_serialized_envelope_escapes_text_and_has_no_declaration() -> None:
    credentials = Credentials(usuario="a&b", senha="<pw>")

    xml = serialize_envelope(build_envelope(ACTION_BUSCA_EVENTOS, "AA1<2>&3", credentials, QueryParameters()))

    assert not xml.startswith("<?xml")
    assert "<usuario>a&amp;b</usuario>" in xml
    assert "<senha>&lt;pw&gt;</senha>" in xml
    assert "<objetos>AA1&lt;2&gt;&amp;3</objetos>" in xml
    assert "<soapenv:Header/>" in xml


def test_empty_credentials_are_sent_as_empty_elements() -> None:
    call = _call_element(build_envelope(ACTION_BUSCA_EVENTOS, "", Credentials(), QueryParameters()))

    assert call.findtext("usuario") == ""
    assert call.findtext("senha") == ""
    assert call.findtext("objetos") == ""
