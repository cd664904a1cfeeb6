"""Get aliases: ``GET /{index}/_alias/{name}``."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Sequence

from ..config import ConnectionSettings
from ..models import HttpMethod
from ..parameters import QueryParameter, RequestParameters
from ..path import RequestPath
from .indices import IndicesOptionalPath, IndicesOptionalPathDescriptor, IndicesOptionalPathRequest

ALL_ALIASES = "*"


class ExpandWildcards(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    NONE = "none"
    ALL = "all"


class GetAliasesRequestParameters(RequestParameters):
    default_http_method = HttpMethod.GET
    routes = ("/_alias", "/_alias/{name}", "/{index}/_alias", "/{index}/_alias/{name}")

    local = QueryParameter(bool)
    ignore_unavailable = QueryParameter(bool)
    allow_no_indices = QueryParameter(bool)
    expand_wildcards = QueryParameter(ExpandWildcards)


class _GetAliasesPath(IndicesOptionalPath):
    parameters_class = GetAliasesRequestParameters

    def __init__(self, indices: Optional[Sequence[str]] = None, alias: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(indices, **kwargs)
        self._alias = alias

    def _route_state(self) -> Dict[str, Any]:
        state = super()._route_state()
        state["alias"] = self._alias
        return state

    def set_route_parameters(self, settings: ConnectionSettings, path: RequestPath) -> None:
        super().set_route_parameters(settings, path)
        path.name = self._alias or ALL_ALIASES


class GetAliasesRequest(_GetAliasesPath, IndicesOptionalPathRequest):
    @property
    def alias(self) -> Optional[str]:
        return self._alias

    @alias.setter
    def alias(self, value: Optional[str]) -> None:
        self._alias = value


class GetAliasesDescriptor(_GetAliasesPath, IndicesOptionalPathDescriptor):
    def alias(self, alias: Optional[str]) -> "GetAliasesDescriptor":
        self._alias = alias
        return self

    def local(self, local: bool = True) -> "GetAliasesDescriptor":
        return self._assign("local", local)

    def ignore_unavailable(self, ignore_unavailable: bool = True) -> "GetAliasesDescriptor":
        return self._assign("ignore_unavailable", ignore_unavailable)

    def allow_no_indices(self, allow_no_indices: bool = True) -> "GetAliasesDescriptor":
        return self._assign("allow_no_indices", allow_no_indices)

    def expand_wildcards(self, expand_wildcards: ExpandWildcards) -> "GetAliasesDescriptor":
        return self._assign("expand_wildcards", expand_wildcards)
