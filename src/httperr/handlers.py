"""FastAPI exception handlers.

register_exception_handlers() routes HTTPError, starlette's HTTPException and
any unhandled exception through respond_json(), so every error response uses
the {"message", "error", "statusCode"} body.
"""

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from httperr.exceptions import HTTPError, status_code_of
from httperr.logging import get_logger
from httperr.server import respond_json
from httperr.status import is_server_error

logger = get_logger(__name__)


def _log_error(request: Request, exc: Exception) -> None:
    code = status_code_of(exc)
    log = logger.bind(status_code=code, path=request.url.path, method=request.method)
    if is_server_error(code):
        log.error("http_error", error=str(exc), exc_info=exc)
    else:
        log.warning("http_error", error=str(exc))


async def http_error_handler(request: Request, exc: HTTPError) -> Response:
    """Return the error's own status and JSON body."""
    _log_error(request, exc)
    return respond_json(exc)


async def starlette_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Wrap framework-raised errors (404 routes, 405 methods) in the shared body.

    The exception's detail becomes the message; its extra headers are kept.
    """
    _log_error(request, exc)
    response = respond_json(HTTPError(exc.status_code, Exception(str(exc.detail))))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Answer with the exception's status (500 by default).

    Server errors are logged with traceback; errors carrying a 4xx
    status_code are logged as warnings like any other client error.
    """
    code = status_code_of(exc)
    if not is_server_error(code):
        _log_error(request, exc)
        return respond_json(exc)
    logger.exception(
        "unhandled_exception",
        status_code=code,
        path=request.url.path,
        method=request.method,
    )
    return respond_json(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``.

    Usage:
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/items/{item_id}")
        async def get_item(item_id: int) -> Item:
            raise not_found(LookupError(f"item {item_id}"))
    """
    app.add_exception_handler(HTTPError, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        StarletteHTTPException,
        starlette_http_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
