"""
schemas/parameters.py
---------------------

Request-side configuration models: the SRO credentials and the three
enumerated query parameters.  The enumeration members are declared in
the same order as the SRO manual lists them; their wire tokens are
produced by :mod:`correios_sro.core.envelope`, not by the enum values.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class QueryType(str, Enum):
    """Kind of query (``tipo``).  SRO only knows the list query."""

    LIST = "list"


class ResultScope(str, Enum):
    """Which events of each object the service returns (``resultado``)."""

    ALL = "all"
    LAST = "last"
    FIRST = "first"


class Language(str, Enum):
    """Language of the event descriptions (``lingua``)."""

    PORTUGUESE = "portuguese"
    ENGLISH = "english"
    SPANISH = "spanish"


class Credentials(BaseModel):
    """SRO user and password.  Not validated: the service decides."""

    usuario: str = ""
    senha: str = ""


class QueryParameters(BaseModel):
    tipo: QueryType = Field(QueryType.LIST, description="Query type.")
    resultado: ResultScope = Field(ResultScope.ALL, description="Event subset returned per object.")
    lingua: Language = Field(Language.PORTUGUESE, description="Response language.")
