"""Query string parameter bags, one subclass per operation kind."""

from __future__ import annotations

import copy
from functools import lru_cache
from typing import Any, ClassVar, Dict, List, Optional, Tuple, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import MissingOrMistypedParameterError
from .models import HttpMethod, RequestConfiguration

TParams = TypeVar("TParams", bound="RequestParameters")


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


class QueryParameter:
    """Typed attribute access to a single query string entry of a bag."""

    def __init__(self, type_: Any = str, name: Optional[str] = None) -> None:
        self.type_ = type_
        self.name = name

    def __set_name__(self, owner: type, attribute: str) -> None:
        if self.name is None:
            self.name = attribute

    def __get__(self, instance: Optional["RequestParameters"], owner: type) -> Any:
        if instance is None:
            return self
        return instance.get_query_string_value(self.name, self.type_)

    def __set__(self, instance: "RequestParameters", value: Any) -> None:
        if value is not None:
            try:
                value = _adapter(self.type_).validate_python(value)
            except ValidationError as exc:
                raise MissingOrMistypedParameterError(self.name, self.type_, value) from exc
        instance.set_query_string_value(self.name, value)


class RequestParameters:
    """Parameters that travel outside the request body.

    ``set_query_string_value`` stores values as given and coerces them on the
    way out; typed :class:`QueryParameter` attributes coerce on write as well,
    so a value they accept always reads back. Reading a key that
    was never written returns the caller's default (``None`` unless given);
    reading a value that cannot be coerced to the requested type raises
    :class:`MissingOrMistypedParameterError`. The same policy applies to every
    lookup, including the typed :class:`QueryParameter` attributes.
    """

    default_http_method: ClassVar[HttpMethod] = HttpMethod.GET
    routes: ClassVar[Tuple[str, ...]] = ("/",)

    pretty = QueryParameter(bool)
    human = QueryParameter(bool)
    error_trace = QueryParameter(bool)
    source = QueryParameter(str)
    filter_path = QueryParameter(List[str])

    def __init__(self) -> None:
        self._query: Dict[str, Any] = {}
        self.request_configuration: Optional[RequestConfiguration] = None

    @property
    def query_string(self) -> Dict[str, Any]:
        return dict(self._query)

    def contains(self, name: str) -> bool:
        return name in self._query

    def get_query_string_value(self, name: str, type_: Any = None, default: Any = None) -> Any:
        if name not in self._query:
            return default
        value = self._query[name]
        if type_ is None:
            return value
        try:
            return _adapter(type_).validate_python(value)
        except ValidationError as exc:
            raise MissingOrMistypedParameterError(name, type_, value) from exc

    def set_query_string_value(self, name: str, value: Any) -> None:
        if value is None:
            self._query.pop(name, None)
            return
        self._query[name] = value

    def add_query_string(self: TParams, name: str, value: Any) -> TParams:
        self.set_query_string_value(name, value)
        return self

    def copy(self: TParams) -> TParams:
        clone = type(self)()
        clone._query = copy.deepcopy(self._query)
        clone.request_configuration = self.request_configuration
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestParameters):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._query == other._query
            and self.request_configuration == other.request_configuration
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(query={self._query!r}, request_configuration={self.request_configuration!r})"
