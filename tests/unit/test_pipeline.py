"""Unit tests for the resolution pipeline."""

import dataclasses
import logging

import pytest

from request_resolver.config import ConnectionSettings
from request_resolver.errors import InvalidArgumentError, RequestValidationError
from request_resolver.models import HttpMethod, RequestConfiguration
from request_resolver.parameters import QueryParameter, RequestParameters
from request_resolver.path import RequestPath
from request_resolver.pipeline import resolve_request
from request_resolver.requests import RequestBase


class DocumentParameters(RequestParameters):
    default_http_method = HttpMethod.PUT
    routes = ("/{index}/_doc", "/{index}/_doc/{id}")

    refresh = QueryParameter(bool)


class IndexDocumentRequest(RequestBase):
    parameters_class = DocumentParameters

    def __init__(self, index=None, document_id=None, **kwargs):
        super().__init__(**kwargs)
        self.index = index
        self.document_id = document_id
        self.calls = []
        self.configuration_seen_by_route = "unset"

    def set_route_parameters(self, settings, path):
        self.calls.append("route")
        self.configuration_seen_by_route = path.request_parameters.request_configuration
        path.index = self.index
        path.id = self.document_id

    def update_request_path(self, settings, path):
        self.calls.append("method")
        path.http_method = HttpMethod.PUT if self.document_id else HttpMethod.POST

    def validate_request_path(self, path):
        self.calls.append("validate")
        assert path.http_method is not None
        if not path.index:
            raise RequestValidationError("index is required", path)


def test_without_override_configuration_is_absent(settings):
    path = IndexDocumentRequest(index="books").resolve(settings)

    assert path.configuration is None
    assert path.request_parameters.request_configuration is None


def test_override_is_propagated_before_route_hook(settings):
    request = IndexDocumentRequest(index="books")
    request.configuration = RequestConfiguration(request_timeout=3)

    path = request.resolve(settings)

    assert request.configuration_seen_by_route == RequestConfiguration(request_timeout=3)
    assert path.request_parameters.request_configuration == RequestConfiguration(request_timeout=3)
    assert path.configuration is request.configuration


def test_hooks_run_in_fixed_order(settings):
    request = IndexDocumentRequest(index="books", document_id="1")

    request.resolve(settings)

    assert request.calls == ["route", "method", "validate"]


def test_default_method_comes_from_parameters(settings):
    class RefreshRequest(RequestBase):
        parameters_class = DocumentParameters

        def set_route_parameters(self, settings, path):
            path.index = "books"

    path = RefreshRequest().resolve(settings)

    assert path.http_method == DocumentParameters.default_http_method


def test_method_hook_may_depend_on_state(settings):
    assert IndexDocumentRequest(index="books").resolve(settings).http_method == HttpMethod.POST
    assert IndexDocumentRequest(index="books", document_id="7").resolve(settings).http_method == HttpMethod.PUT


def test_validation_failure_is_raised_after_other_hooks(settings):
    request = IndexDocumentRequest()

    with pytest.raises(RequestValidationError) as exc_info:
        request.resolve(settings)

    assert request.calls == ["route", "method", "validate"]
    assert exc_info.value.path.http_method == HttpMethod.POST


def test_missing_method_fails_validation(settings):
    class NoMethodRequest(RequestBase):
        def update_request_path(self, settings, path):
            path.http_method = None

    with pytest.raises(RequestValidationError):
        NoMethodRequest().resolve(settings)


def test_route_hook_must_not_touch_configuration(settings):
    class MeddlingRequest(RequestBase):
        def set_route_parameters(self, settings, path):
            path.request_parameters.request_configuration = RequestConfiguration(max_retries=9)

    with pytest.raises(RequestValidationError):
        MeddlingRequest().resolve(settings)


def test_resolution_is_idempotent(settings):
    request = IndexDocumentRequest(index="books", document_id="1")
    request.parameters.refresh = True
    request.configuration = RequestConfiguration(opaque_id="a")

    first = request.resolve(settings)
    second = request.resolve(settings)

    assert first == second
    assert first is not second
    assert first.url_path == second.url_path == "/books/_doc/1"
    assert first.query_params() == second.query_params() == {"refresh": "true"}


def test_descriptor_does_not_alias_request_state(settings):
    request = IndexDocumentRequest(index="books")
    request.parameters.refresh = True

    path = request.resolve(settings)
    request.parameters.refresh = False
    request.configuration = RequestConfiguration(request_timeout=1)
    request.index = "magazines"

    assert path.request_parameters is not request.parameters
    assert path.query_params() == {"refresh": "true"}
    assert path.configuration is None
    assert path.index == "books"


def test_resolution_does_not_write_override_into_request(settings):
    request = IndexDocumentRequest(index="books")
    request.configuration = RequestConfiguration(request_timeout=1)

    request.resolve(settings)

    assert request.parameters.request_configuration is None


def test_global_query_parameters_are_merged_request_wins():
    settings = ConnectionSettings(connection_global_query_parameters={"pretty": "true", "refresh": "false"})
    request = IndexDocumentRequest(index="books")
    request.parameters.refresh = True

    path = resolve_request(request, settings)

    assert path.query_params() == {"refresh": "true", "pretty": "true"}
    assert request.parameters.query_string == {"refresh": True}


def test_path_selector_seeds_every_resolution(settings):
    class TypedRefreshRequest(RequestBase):
        parameters_class = DocumentParameters

    request = TypedRefreshRequest(path_selector=lambda path: dataclasses.replace(path, index="books", id="3"))

    first = request.resolve(settings)
    first.index = "changed"
    second = request.resolve(settings)

    assert second.index == "books"
    assert second.url_path == "/books/_doc/3"


def test_path_selector_must_return_a_path(settings):
    request = RequestBase(path_selector=lambda path: None)

    with pytest.raises(InvalidArgumentError):
        request.resolve(settings)


def test_path_selector_must_be_callable():
    with pytest.raises(InvalidArgumentError):
        RequestBase(path_selector="books")


def test_resolution_logs_redacted_query(settings, caplog):
    request = IndexDocumentRequest(index="books")
    request.parameters.set_query_string_value("api_key", "s3cr3t")

    with caplog.at_level(logging.DEBUG, logger="request_resolver.pipeline"):
        path = request.resolve(settings)

    assert isinstance(path, RequestPath)
    assert "POST /books/_doc" in caplog.text
    assert "s3cr3t" not in caplog.text
