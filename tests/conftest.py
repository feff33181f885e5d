"""Shared fixtures for the SRO client tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from correios_sro.client import CorreiosSRO
from correios_sro.core.config import Settings, get_settings

API_URL = "http://webservice.correios.com.br:80/service/rastro"

RESPONSE_BUSCA_EVENTOS = """<?xml version="1.0" encoding="UTF-8"?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Header/>
  <soapenv:Body>
    <ns2:buscaEventosResponse xmlns:ns2="http://resource.webservice.correios.com.br/">
      <return>
        <versao>2.0</versao>
        <qtd>1</qtd>
        <objeto>
          <numero>AA123456789BR</numero>
          <sigla>AA</sigla>
          <nome>ETIQUETA LOGICA SEDEX</nome>
          <categoria>SEDEX</categoria>
          <evento>
            <tipo>BDE</tipo>
            <status>01</status>
            <data>18/03/2014</data>
            <hora>18:37</hora>
            <descricao>Objeto entregue ao destinatário</descricao>
            <local>CEE MACEIO</local>
            <codigo>57060971</codigo>
            <cidade>MACEIO</cidade>
            <uf>AL</uf>
          </evento>
          <evento>
            <tipo>DO</tipo>
            <status>01</status>
            <data>17/03/2014</data>
            <hora>10:02</hora>
            <descricao>Objeto encaminhado</descricao>
            <detalhe></detalhe>
            <local>CTE BENFICA</local>
            <codigo>20911971</codigo>
            <cidade>RIO DE JANEIRO</cidade>
            <uf>RJ</uf>
            <destino>
              <local>CTCE MACEIO</local>
              <codigo>57060971</codigo>
              <cidade>MACEIO</cidade>
              <bairro>TABULEIRO DO MARTINS</bairro>
              <uf>AL</uf>
            </destino>
          </evento>
        </objeto>
      </return>
    </ns2:buscaEventosResponse>
  </soapenv:Body>
</soapenv:Envelope>
""".encode("utf-8")

RESPONSE_OBJETO_NAO_ENCONTRADO = b"""<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Body>
    <ns2:buscaEventosListaResponse xmlns:ns2="http://resource.webservice.correios.com.br/">
      <return>
        <versao>2.0</versao>
        <qtd>1</qtd>
        <objeto>
          <numero>XX000000000BR</numero>
          <erro>Objeto nao encontrado na base de dados dos Correios.</erro>
        </objeto>
      </return>
    </ns2:buscaEventosListaResponse>
  </soapenv:Body>
</soapenv:Envelope>
"""

RESPONSE_SOAP_FAULT = b"""<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Body>
    <soapenv:Fault>
      <faultcode>soap:Server</faultcode>
      <faultstring>Usuario ou senha invalidos</faultstring>
    </soapenv:Fault>
  </soapenv:Body>
</soapenv:Envelope>
"""


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def sro(settings: Settings) -> Iterator[CorreiosSRO]:
    client = CorreiosSRO("user1", "pass1", settings=settings)
    yield client
    client.close()
