"""Resolve operations against a search cluster into dispatchable request paths."""

from .config import ConnectionSettings, get_settings
from .errors import (
    InvalidArgumentError,
    MissingOrMistypedParameterError,
    RequestResolutionError,
    RequestValidationError,
)
from .models import HttpMethod, RequestConfiguration, RequestConfigurationDescriptor
from .parameters import QueryParameter, RequestParameters
from .path import RequestPath
from .pipeline import resolve_request
from .requests import RequestBase, RequestDescriptorBase

__all__ = [
    "ConnectionSettings",
    "HttpMethod",
    "InvalidArgumentError",
    "MissingOrMistypedParameterError",
    "QueryParameter",
    "RequestBase",
    "RequestConfiguration",
    "RequestConfigurationDescriptor",
    "RequestDescriptorBase",
    "RequestParameters",
    "RequestPath",
    "RequestResolutionError",
    "RequestValidationError",
    "get_settings",
    "resolve_request",
]
