"""HTTP error values.

HTTPError wraps a status code and an optional cause. It is an ordinary
exception (raise it, chain it), a status-code carrier (``status_code``) and a
JSON payload (``to_json()``) rendered in the shared ErrorResponse shape:
{"message": "...", "error": "...", "statusCode": ...}.
"""

import json
from http import HTTPStatus
from typing import Protocol, TypeVar, runtime_checkable

from httperr import config
from httperr.schemas.error import ErrorResponse
from httperr.status import status_text


@runtime_checkable
class StatusCoder(Protocol):
    """Anything that carries an HTTP status code.

    Matches HTTPError as well as third-party exceptions exposing
    ``status_code`` (e.g. starlette's HTTPException).
    """

    status_code: int


@runtime_checkable
class SupportsJSON(Protocol):
    """Anything that knows how to serialize itself as a JSON body."""

    def to_json(self) -> bytes: ...


def quote(text: str) -> str:
    """Double-quote ``text`` with backslash escapes, keeping non-ASCII as is."""
    return json.dumps(text, ensure_ascii=False)


class HTTPError(Exception):
    """An error carrying an HTTP status code and an optional cause.

    The code is stored verbatim (no range validation). Both fields are
    read-only once constructed.
    """

    def __init__(self, code: int, cause: BaseException | None = None) -> None:
        self._code = code
        self._cause = cause
        super().__init__(code, cause)
        # Surface the cause in tracebacks like ``raise ... from cause`` would
        self.__cause__ = cause

    @property
    def code(self) -> int:
        return self._code

    @property
    def status_code(self) -> int:
        return self._code

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def unwrap(self) -> BaseException | None:
        """Return the wrapped cause, if any."""
        return self._cause

    @property
    def message(self) -> str:
        """The cause's text, or the reason phrase when there is no cause."""
        if self._cause is None:
            return status_text(self._code)
        return str(self._cause)

    def payload(self) -> ErrorResponse:
        return ErrorResponse(
            message=self.message,
            error=status_text(self._code),
            status_code=self._code,
        )

    def to_json(self) -> bytes:
        """Serialize as {"message": ..., "error": ..., "statusCode": ...}."""
        return self.payload().model_dump_json(by_alias=True).encode()

    def __str__(self) -> str:
        status = status_text(self._code)
        if self._cause is None:
            return f"{self._code} {status}"
        return f"{self._code} {status}: {quote(str(self._cause))}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, cause={self._cause!r})"


def errorf(code: int, fmt: str, *args: object) -> HTTPError:
    """Create an HTTPError whose cause is ``fmt % args``.

    ``fmt`` is always formatted, so a literal percent sign is written ``%%``.

    Example:
        errorf(404, "user %s not found", user_id)
    """
    message = fmt % args
    return HTTPError(code, Exception(message))


def bad_request(cause: BaseException | None = None) -> HTTPError:
    """Create an HTTP 400 error."""
    return HTTPError(HTTPStatus.BAD_REQUEST.value, cause)


def internal_server_error(cause: BaseException | None = None) -> HTTPError:
    """Create an HTTP 500 error."""
    return HTTPError(HTTPStatus.INTERNAL_SERVER_ERROR.value, cause)


def not_found(cause: BaseException | None = None) -> HTTPError:
    """Create an HTTP 404 error."""
    return HTTPError(HTTPStatus.NOT_FOUND.value, cause)


def method_not_allowed(cause: BaseException | None = None) -> HTTPError:
    """Create an HTTP 405 error."""
    return HTTPError(HTTPStatus.METHOD_NOT_ALLOWED.value, cause)


def status_code_of(err: BaseException, default: int | None = None) -> int:
    """Return the status code ``err`` carries, else ``default``.

    ``default`` falls back to ``settings.default_status_code`` (500).
    Boolean and non-integer ``status_code`` attributes are ignored.
    """
    if isinstance(err, StatusCoder):
        code = err.status_code
        if isinstance(code, int) and not isinstance(code, bool):
            return int(code)
    return config.settings.default_status_code if default is None else default


E = TypeVar("E", bound=BaseException)


def find_cause(err: BaseException | None, kind: type[E]) -> E | None:
    """Return the first error in the chain starting at ``err`` that is a ``kind``.

    The chain follows ``unwrap()`` where an error provides it, otherwise
    ``__cause__``. Cycles are cut after the first repeat.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, kind):
            return err
        seen.add(id(err))
        unwrap = getattr(err, "unwrap", None)
        err = unwrap() if callable(unwrap) else err.__cause__
    return None
