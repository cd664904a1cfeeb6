"""Bulk alias updates: ``POST /_aliases``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Union

from ..errors import InvalidArgumentError, RequestValidationError
from ..models import HttpMethod
from ..parameters import QueryParameter, RequestParameters
from ..path import RequestPath
from ..requests import RequestBase, RequestDescriptorBase


@dataclass(frozen=True)
class AliasAction:
    operation: ClassVar[str] = ""

    index: Optional[str] = None
    alias: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        body = {key: value for key, value in self._fields().items() if value is not None}
        return {self.operation: body}

    def _fields(self) -> Dict[str, Any]:
        return {"index": self.index, "alias": self.alias}


@dataclass(frozen=True)
class AliasAddAction(AliasAction):
    operation: ClassVar[str] = "add"

    filter: Optional[Dict[str, Any]] = None
    routing: Optional[str] = None
    index_routing: Optional[str] = None
    search_routing: Optional[str] = None

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields.update(
            filter=self.filter,
            routing=self.routing,
            index_routing=self.index_routing,
            search_routing=self.search_routing,
        )
        return fields


@dataclass(frozen=True)
class AliasRemoveAction(AliasAction):
    operation: ClassVar[str] = "remove"


class AliasRemoveDescriptor:
    action_class: ClassVar[type] = AliasRemoveAction

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def index(self, index: str) -> "AliasRemoveDescriptor":
        self._values["index"] = index
        return self

    def alias(self, alias: str) -> "AliasRemoveDescriptor":
        self._values["alias"] = alias
        return self

    def build(self) -> AliasAction:
        return self.action_class(**self._values)


class AliasAddDescriptor(AliasRemoveDescriptor):
    action_class: ClassVar[type] = AliasAddAction

    def filter(self, query: Dict[str, Any]) -> "AliasAddDescriptor":
        self._values["filter"] = query
        return self

    def routing(self, routing: str) -> "AliasAddDescriptor":
        self._values["routing"] = routing
        return self

    def index_routing(self, routing: str) -> "AliasAddDescriptor":
        self._values["index_routing"] = routing
        return self

    def search_routing(self, routing: str) -> "AliasAddDescriptor":
        self._values["search_routing"] = routing
        return self


class BulkAliasRequestParameters(RequestParameters):
    default_http_method = HttpMethod.POST
    routes = ("/_aliases",)

    timeout = QueryParameter(str)
    master_timeout = QueryParameter(str)


class _BulkAliasPath(RequestBase):
    parameters_class = BulkAliasRequestParameters

    def __init__(self, actions: Optional[Sequence[AliasAction]] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._actions: List[AliasAction] = list(actions or [])

    def _route_state(self) -> Dict[str, Any]:
        return {"actions": list(self._actions)}

    def to_body(self) -> Dict[str, Any]:
        return {"actions": [action.to_dict() for action in self._actions]}

    def validate_request_path(self, path: RequestPath) -> None:
        if not self._actions:
            raise RequestValidationError("Bulk alias request requires at least one action", path)
        for position, action in enumerate(self._actions):
            if not action.index or not action.alias:
                raise RequestValidationError(
                    f"Alias action #{position} ({action.operation}) requires both index and alias", path
                )


class BulkAliasRequest(_BulkAliasPath):
    @property
    def actions(self) -> List[AliasAction]:
        return self._actions

    @actions.setter
    def actions(self, value: Optional[Sequence[AliasAction]]) -> None:
        self._actions = list(value or [])


class BulkAliasDescriptor(_BulkAliasPath, RequestDescriptorBase):
    def add(
        self,
        action: Union[AliasAction, Callable[[AliasAddDescriptor], AliasRemoveDescriptor], None],
    ) -> "BulkAliasDescriptor":
        if callable(action) and not isinstance(action, AliasAction):
            action = _select(action, AliasAddDescriptor())
        if not isinstance(action, AliasAction):
            raise InvalidArgumentError("action", "must be an AliasAction or a selector")
        self._actions.append(action)
        return self

    def remove(self, selector: Optional[Callable[[AliasRemoveDescriptor], AliasRemoveDescriptor]]) -> "BulkAliasDescriptor":
        if selector is None or not callable(selector):
            raise InvalidArgumentError("selector")
        return self.add(_select(selector, AliasRemoveDescriptor()))

    def timeout(self, timeout: str) -> "BulkAliasDescriptor":
        return self._assign("timeout", timeout)

    def master_timeout(self, master_timeout: str) -> "BulkAliasDescriptor":
        return self._assign("master_timeout", master_timeout)


def _select(selector: Callable[[Any], Any], descriptor: AliasRemoveDescriptor) -> Any:
    result = selector(descriptor)
    if isinstance(result, AliasRemoveDescriptor):
        return result.build()
    return result
