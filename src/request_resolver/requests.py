"""Plain and fluent request forms sharing one resolution pipeline."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Type, TypeVar, Union

from .config import ConnectionSettings, get_settings
from .errors import InvalidArgumentError
from .models import RequestConfiguration, RequestConfigurationDescriptor
from .parameters import RequestParameters
from .path import RequestPath
from .pipeline import resolve_request

TParameters = TypeVar("TParameters", bound=RequestParameters)
TDescriptor = TypeVar("TDescriptor", bound="RequestDescriptorBase")

PathSelector = Callable[[RequestPath], RequestPath]
ConfigurationSelector = Callable[
    [RequestConfigurationDescriptor],
    Union[RequestConfigurationDescriptor, RequestConfiguration, None],
]


class RequestBase(Generic[TParameters]):
    """A single operation against the cluster, before it is resolved.

    Subclasses set ``parameters_class`` and may override the three hooks
    :meth:`set_route_parameters`, :meth:`update_request_path` and
    :meth:`validate_request_path`. The order in which they run is owned by
    :func:`resolve_request` and cannot be changed by a subclass.
    """

    parameters_class: ClassVar[Type[RequestParameters]] = RequestParameters

    def __init__(self, path_selector: Optional[PathSelector] = None) -> None:
        if path_selector is not None and not callable(path_selector):
            raise InvalidArgumentError("path_selector", "must be callable")
        self.path_selector = path_selector
        self._parameters: TParameters = self.parameters_class()  # type: ignore[assignment]
        self._configuration: Optional[RequestConfiguration] = None

    @property
    def parameters(self) -> TParameters:
        """Parameters supplied on the query string rather than in the body."""
        return self._parameters

    @parameters.setter
    def parameters(self, value: TParameters) -> None:
        if not isinstance(value, self.parameters_class):
            raise InvalidArgumentError("parameters", f"must be a {self.parameters_class.__name__}")
        self._parameters = value

    @property
    def configuration(self) -> Optional[RequestConfiguration]:
        """Connection setting overrides for this call alone."""
        return self._configuration

    @configuration.setter
    def configuration(self, value: Optional[RequestConfiguration]) -> None:
        if value is not None and not isinstance(value, RequestConfiguration):
            raise InvalidArgumentError("configuration", "must be a RequestConfiguration")
        self._configuration = value

    def resolve(self, settings: Optional[ConnectionSettings] = None) -> RequestPath[TParameters]:
        return resolve_request(self, settings or get_settings())

    def describe(self) -> Dict[str, Any]:
        """Snapshot of the request state, for inspection and comparison."""
        return {
            "operation": type(self._parameters).__name__,
            "route": self._route_state(),
            "query": self._parameters.query_string,
            "configuration": self._configuration,
        }

    def _route_state(self) -> Dict[str, Any]:
        return {}

    def set_route_parameters(self, settings: ConnectionSettings, path: RequestPath[TParameters]) -> None:
        pass

    def update_request_path(self, settings: ConnectionSettings, path: RequestPath[TParameters]) -> None:
        path.http_method = path.request_parameters.default_http_method

    def validate_request_path(self, path: RequestPath[TParameters]) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"


class RequestDescriptorBase(RequestBase[TParameters]):
    """Fluent form of :class:`RequestBase`.

    Every setter returns the descriptor itself so calls chain left to right.
    Only one concrete descriptor type per hierarchy is supported: the
    ``TDescriptor`` bound resolves to the class the chain started from.
    Descriptors compare by identity; use :meth:`describe` to inspect state.
    """

    def _request_params(self: TDescriptor, assigner: Optional[Callable[[TParameters], Any]]) -> TDescriptor:
        if assigner is not None:
            assigner(self._parameters)
        return self

    def _assign(self: TDescriptor, name: str, value: Any) -> TDescriptor:
        return self._request_params(lambda parameters: parameters.set_query_string_value(name, value))

    def request_configuration(self: TDescriptor, selector: Optional[ConfigurationSelector]) -> TDescriptor:
        """Specify settings for this request alone, e.g. a custom timeout."""
        if selector is None or not callable(selector):
            raise InvalidArgumentError("selector")
        result = selector(RequestConfigurationDescriptor())
        if isinstance(result, RequestConfigurationDescriptor):
            result = result.build()
        self.configuration = result
        return self

    def add_query_string(self: TDescriptor, name: str, value: Any) -> TDescriptor:
        return self._assign(name, value)

    def pretty(self: TDescriptor, pretty: bool = True) -> TDescriptor:
        return self._assign("pretty", pretty)

    def human(self: TDescriptor, human: bool = True) -> TDescriptor:
        return self._assign("human", human)

    def error_trace(self: TDescriptor, error_trace: bool = True) -> TDescriptor:
        return self._assign("error_trace", error_trace)

    def filter_path(self: TDescriptor, *paths: str) -> TDescriptor:
        return self._assign("filter_path", list(paths) or None)
