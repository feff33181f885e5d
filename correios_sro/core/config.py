"""
core/config.py
----------------

Library configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``.  These settings only tune the default HTTP
collaborators (timeout, user agent).  The service endpoint is the fixed
:data:`DEFAULT_API_URL` and is never read from the environment; the
query itself (credentials, result scope, language) is always supplied
through the :class:`~correios_sro.client.CorreiosSRO` API.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://webservice.correios.com.br:80/service/rastro"


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``SRO_``.  For example, to bound every request to
    fifteen seconds you can set ``SRO_HTTP_TIMEOUT=15``.

    See :class:`pydantic_settings.BaseSettings` for details on how
    environment variables are mapped onto fields.
    """

    http_timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Timeout in seconds for the default HTTP clients. None keeps the httpx default.",
    )
    user_agent: Optional[str] = Field(None, description="User-Agent sent by the default HTTP clients.")

    model_config = SettingsConfigDict(env_prefix="SRO_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the library settings.

    Using a cache prevents parsing the environment on every client
    construction.  Call ``get_settings.cache_clear()`` after changing
    the environment in tests.
    """
    return Settings()
