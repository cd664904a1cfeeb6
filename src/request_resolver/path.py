"""Resolved request paths handed to the transport."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar
from urllib.parse import quote

from .errors import RequestValidationError
from .models import HttpMethod, RequestConfiguration
from .parameters import RequestParameters

TParameters = TypeVar("TParameters", bound=RequestParameters)

_PLACEHOLDER = re.compile(r"{(\w+)}")
SEGMENTS = ("index", "type", "id", "name")


@dataclass
class RequestPath(Generic[TParameters]):
    http_method: Optional[HttpMethod] = None
    index: Optional[str] = None
    type: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    request_parameters: Optional[TParameters] = None

    @property
    def configuration(self) -> Optional[RequestConfiguration]:
        if self.request_parameters is None:
            return None
        return self.request_parameters.request_configuration

    def segments(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in SEGMENTS if getattr(self, key)}

    @property
    def url_path(self) -> str:
        """Fill the most specific route template whose segments are all set."""
        routes = type(self.request_parameters).routes if self.request_parameters else ("/",)
        segments = self.segments()
        candidates = sorted(routes, key=lambda route: len(_PLACEHOLDER.findall(route)), reverse=True)
        for route in candidates:
            placeholders = _PLACEHOLDER.findall(route)
            if all(key in segments for key in placeholders):
                return _PLACEHOLDER.sub(lambda match: quote(segments[match.group(1)], safe=",*"), route)
        raise RequestValidationError(f"No route of {type(self.request_parameters).__name__} matches {sorted(segments)}", self)

    def query_params(self) -> Dict[str, str]:
        if self.request_parameters is None:
            return {}
        query: Dict[str, str] = {}
        for key, value in self.request_parameters.query_string.items():
            encoded = _encode(value)
            if encoded is not None:
                query[key] = encoded
        return query

    def to_dict(self) -> Dict[str, Any]:
        configuration = self.configuration
        return {
            "method": self.http_method.value if self.http_method else None,
            "path": self.url_path,
            "query": self.query_params(),
            "configuration": configuration.to_dict() if configuration else None,
        }


def _encode(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        items = [_encode(item) for item in value]
        return ",".join(item for item in items if item is not None)
    return str(value)
