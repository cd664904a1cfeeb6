"""CLI entry point: resolve an operation and print the dispatch descriptor."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, Tuple

from .config import get_settings
from .errors import RequestResolutionError
from .logging import configure_logging, redact_configuration, redact_payload
from .operations import OPERATIONS, AliasAddAction, AliasRemoveAction
from .requests import RequestBase
from .transport import build_http_request

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="request-resolver",
        description="Resolve an operation into its HTTP method, path and query string.",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS))
    parser.add_argument("--index", action="append", default=[], help="Index name, repeatable")
    parser.add_argument("--all-indices", action="store_true")
    parser.add_argument("--alias", default=None)
    parser.add_argument("--add", action="append", default=[], metavar="INDEX:ALIAS")
    parser.add_argument("--remove", action="append", default=[], metavar="INDEX:ALIAS")
    parser.add_argument("--param", action="append", default=[], metavar="KEY=VALUE")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout override in seconds")
    parser.add_argument("--url", action="store_true", help="Print the full URL instead of JSON")
    return parser


_OPERATION_OPTIONS = {
    "--index": ("index", {"get-aliases"}),
    "--all-indices": ("all_indices", {"get-aliases"}),
    "--alias": ("alias", {"get-aliases"}),
    "--add": ("add", {"bulk-aliases"}),
    "--remove": ("remove", {"bulk-aliases"}),
}


def _check_options(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    for option, (dest, operations) in _OPERATION_OPTIONS.items():
        value = getattr(args, dest)
        if value not in (None, False, []) and args.operation not in operations:
            parser.error(f"{option} is not supported by {args.operation}")


def _split(value: str, separator: str) -> Tuple[str, str]:
    left, found, right = value.partition(separator)
    if not found or not left or not right:
        raise argparse.ArgumentTypeError(f"Expected '<left>{separator}<right>', got '{value}'")
    return left, right


def _build_request(args: argparse.Namespace) -> RequestBase:
    _, descriptor_class = OPERATIONS[args.operation]
    request = descriptor_class()

    if args.operation == "get-aliases":
        if args.index:
            request.index(*args.index)
        if args.all_indices:
            request.all_indices()
        request.alias(args.alias)
    elif args.operation == "bulk-aliases":
        for value in args.add:
            index, alias = _split(value, ":")
            request.add(AliasAddAction(index=index, alias=alias))
        for value in args.remove:
            index, alias = _split(value, ":")
            request.add(AliasRemoveAction(index=index, alias=alias))

    for value in args.param:
        key, param_value = _split(value, "=")
        request.add_query_string(key, param_value)

    if args.timeout is not None:
        request.request_configuration(lambda c: c.request_timeout(args.timeout))
    return request


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    configure_logging(settings.resolver_log_level)

    parser = _build_parser()
    args = parser.parse_args(argv)
    _check_options(parser, args)

    try:
        request = _build_request(args)
        path = request.resolve(settings)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except RequestResolutionError as exc:
        logger.error("Failed to resolve %s: %s", args.operation, exc)
        return 1

    if args.url:
        print(f"{path.http_method.value} {build_http_request(path, settings).url}")
        return 0

    output = path.to_dict()
    output["query"] = redact_payload(output["query"])
    output["configuration"] = redact_configuration(path.configuration)
    if hasattr(request, "to_body"):
        output["body"] = request.to_body()
    print(json.dumps(output, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
