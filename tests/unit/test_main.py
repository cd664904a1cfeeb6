"""Unit tests for the CLI entry point."""

import json

import pytest

from request_resolver import main as cli
from request_resolver.models import RequestConfiguration


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, settings):
    monkeypatch.setattr(cli, "get_settings", lambda: settings)


def test_get_aliases_prints_descriptor(capsys):
    exit_code = cli.main(["get-aliases", "--index", "logs-2024", "--alias", "current", "--param", "local=true"])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output == {
        "method": "GET",
        "path": "/logs-2024/_alias/current",
        "query": {"local": "true"},
        "configuration": None,
    }


def test_bulk_aliases_includes_body_and_timeout(capsys):
    exit_code = cli.main(["bulk-aliases", "--add", "logs-2024:logs", "--remove", "logs-2023:logs", "--timeout", "4"])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["method"] == "POST"
    assert output["configuration"] == {"request_timeout": 4.0}
    assert output["body"] == {
        "actions": [
            {"add": {"index": "logs-2024", "alias": "logs"}},
            {"remove": {"index": "logs-2023", "alias": "logs"}},
        ]
    }


def test_secret_parameters_are_redacted(capsys):
    cli.main(["cat-thread-pool", "--param", "api_key=s3cr3t"])

    output = json.loads(capsys.readouterr().out)
    assert output["query"] == {"api_key": "***REDACTED***"}


def test_url_flag_prints_full_url(capsys):
    exit_code = cli.main(["cat-thread-pool", "--url", "--param", "v=true"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "GET http://search.local:9200/_cat/thread_pool?v=true"


def test_validation_failure_returns_error_code(capsys):
    exit_code = cli.main(["bulk-aliases"])

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_malformed_pair_is_a_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["bulk-aliases", "--add", "no-separator"])

    assert exc_info.value.code == 2


@pytest.mark.parametrize(
    "argv",
    [
        ["cat-thread-pool", "--index", "logs"],
        ["cat-thread-pool", "--all-indices"],
        ["bulk-aliases", "--add", "a:b", "--alias", "b"],
        ["get-aliases", "--add", "logs-2024:logs"],
        ["get-aliases", "--remove", "logs-2023:logs"],
    ],
)
def test_options_unused_by_operation_are_rejected(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)

    assert exc_info.value.code == 2
    assert "is not supported by" in capsys.readouterr().err


def test_basic_authentication_is_redacted_in_output(capsys, monkeypatch):
    original = cli._build_request

    def build_with_credentials(args):
        request = original(args)
        request.configuration = RequestConfiguration(basic_authentication=("elastic", "changeme"))
        return request

    monkeypatch.setattr(cli, "_build_request", build_with_credentials)
    cli.main(["cat-thread-pool"])

    output = json.loads(capsys.readouterr().out)
    assert output["configuration"] == {"basic_authentication": "***REDACTED***"}
