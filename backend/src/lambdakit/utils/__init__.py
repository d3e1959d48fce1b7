"""Utility modules for the example handlers."""

from lambdakit.utils.parsers import (
    optional_str,
    parse_int,
    parse_json_body,
    path_param,
)
from lambdakit.utils.responses import error_response, json_response
from lambdakit.utils.logging import (
    configure_logging,
    get_logger,
    mask_pii,
    set_request_context,
    clear_request_context,
)

__all__ = [
    "clear_request_context",
    "configure_logging",
    "error_response",
    "get_logger",
    "json_response",
    "mask_pii",
    "optional_str",
    "parse_int",
    "parse_json_body",
    "path_param",
    "set_request_context",
]
