"""HTTP status-code errors with a shared JSON body."""

from httperr.client import (
    from_httpx_response,
    from_httpx_response_async,
    from_response,
    parse_media_type,
    raise_for_error,
    raise_for_error_async,
)
from httperr.exceptions import (
    HTTPError,
    StatusCoder,
    SupportsJSON,
    bad_request,
    errorf,
    find_cause,
    internal_server_error,
    method_not_allowed,
    not_found,
    status_code_of,
)
from httperr.handlers import register_exception_handlers
from httperr.schemas.error import ErrorResponse
from httperr.server import respond_json
from httperr.status import (
    is_client_error,
    is_error,
    is_informational,
    is_redirect,
    is_server_error,
    is_success,
    status_text,
)

__all__ = [
    "ErrorResponse",
    "HTTPError",
    "StatusCoder",
    "SupportsJSON",
    "bad_request",
    "errorf",
    "find_cause",
    "from_httpx_response",
    "from_httpx_response_async",
    "from_response",
    "internal_server_error",
    "is_client_error",
    "is_error",
    "is_informational",
    "is_redirect",
    "is_server_error",
    "is_success",
    "method_not_allowed",
    "not_found",
    "parse_media_type",
    "raise_for_error",
    "raise_for_error_async",
    "register_exception_handlers",
    "respond_json",
    "status_code_of",
    "status_text",
]
