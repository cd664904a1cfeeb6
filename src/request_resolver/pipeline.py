"""Turns a request into the path the transport dispatches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import ConnectionSettings
from .errors import InvalidArgumentError, RequestValidationError
from .logging import redact_configuration, redact_payload
from .path import RequestPath

if TYPE_CHECKING:
    from .requests import RequestBase

logger = logging.getLogger(__name__)


def resolve_request(request: "RequestBase", settings: ConnectionSettings) -> RequestPath:
    """Resolve ``request`` against ``settings``.

    The order is fixed: bind parameters, carry over the configuration
    override, route hook, method hook, then validation. The request itself
    is never mutated, so resolving twice yields equal paths.
    """
    path: RequestPath = RequestPath()
    if request.path_selector is not None:
        path = request.path_selector(path)
        if not isinstance(path, RequestPath):
            raise InvalidArgumentError("path_selector", "must return a RequestPath")

    parameters = request.parameters.copy()
    for key, value in settings.connection_global_query_parameters.items():
        if not parameters.contains(key):
            parameters.set_query_string_value(key, value)
    path.request_parameters = parameters

    configuration = request.configuration
    if configuration is not None:
        parameters.request_configuration = configuration
    expected_configuration = parameters.request_configuration

    request.set_route_parameters(settings, path)
    request.update_request_path(settings, path)

    if path.http_method is None:
        raise RequestValidationError(f"{type(request).__name__} resolved without an HTTP method", path)
    if path.request_parameters is not parameters or parameters.request_configuration != expected_configuration:
        raise RequestValidationError(f"{type(request).__name__} replaced its resolved parameters", path)
    request.validate_request_path(path)
    url_path = path.url_path

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved %s %s %s query=%s configuration=%s",
            type(request).__name__,
            path.http_method.value,
            url_path,
            redact_payload(path.query_params()),
            redact_configuration(path.configuration),
        )
    return path
