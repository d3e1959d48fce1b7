"""Invoke an example function locally and print its formatted output.

Direct invocation passes a JSON event straight to the handler:

    python backend/scripts/invoke_local.py songs --data '{"artist": "No One You Know"}'

HTTP invocation builds an API Gateway proxy event from a request:

    python backend/scripts/invoke_local.py --http GET /items/42

Set ``ENV=local`` to send DynamoDB and S3 calls to the local emulators.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from lambdakit.local.events import format_json
from lambdakit.local.functions import FUNCTIONS
from lambdakit.local.invoke import invoke_function
from lambdakit.local.invoke import invoke_http

logger = logging.getLogger(__name__)


def _parse_header(value: str) -> tuple[str, str]:
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Header must look like 'Name: value', got {value!r}")
    return name.strip(), header_value.strip()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "function",
        nargs="?",
        choices=sorted(FUNCTIONS),
        help="Function to invoke directly.",
    )
    parser.add_argument(
        "--data",
        help="Event JSON passed to the function.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="File containing the event JSON.",
    )
    parser.add_argument(
        "--http",
        nargs=2,
        metavar=("METHOD", "URL"),
        help="Send an HTTP request through the local API Gateway routes.",
    )
    parser.add_argument(
        "--header",
        action="append",
        type=_parse_header,
        default=[],
        help="Request header for --http, e.g. 'Content-Type: application/json'.",
    )
    parser.add_argument(
        "--body",
        help="Request body for --http.",
    )
    args = parser.parse_args(argv)
    if bool(args.function) == bool(args.http):
        parser.error("give either a function name or --http METHOD URL")
    if args.data and args.file:
        parser.error("--data and --file are mutually exclusive")
    return args


def _load_event(args: argparse.Namespace) -> Any:
    if args.file:
        return json.loads(args.file.read_text(encoding="utf-8"))
    if args.data:
        return json.loads(args.data)
    return {}


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _parse_args(argv)

    if args.http:
        method, url = args.http
        response = invoke_http(method, url, headers=dict(args.header), body=args.body)
        logger.info("HTTP %s", response["statusCode"])
        print(format_json(response.get("body", "")))
        return 0 if response["statusCode"] < 400 else 1

    result = invoke_function(args.function, _load_event(args))
    print(format_json(json.dumps(result)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
