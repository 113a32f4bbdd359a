"""Turn received HTTP error responses back into HTTPError values.

from_response() works on plain status/headers/body values; the httpx
adapters read and close an httpx.Response first. Text bodies become the
cause verbatim; anything else is decoded as an ErrorResponse payload.
"""

import re
from collections.abc import Mapping
from typing import BinaryIO

import httpx
from pydantic import ValidationError

from httperr import config
from httperr.exceptions import HTTPError, quote
from httperr.logging import get_logger
from httperr.schemas.error import ErrorResponse
from httperr.status import is_error

logger = get_logger(__name__)

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9a-z]+"
_MEDIA_TYPE_RE = re.compile(rf"{_TOKEN}/{_TOKEN}")


def parse_media_type(content_type: str | None) -> str:
    """Return the lower-cased media type of a Content-Type value.

    Parameters are dropped. A missing or malformed value gives "".
    """
    if not content_type:
        return ""
    media_type = content_type.split(";", 1)[0].strip().lower()
    if _MEDIA_TYPE_RE.fullmatch(media_type) is None:
        return ""
    return media_type


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup that also works on plain dicts."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def _read_failed(status_code: int, exc: BaseException) -> HTTPError:
    logger.warning("response_body_read_failed", status_code=status_code, error=str(exc))
    return HTTPError(status_code, Exception(f"Failed to read response body: {quote(str(exc))}"))


def _from_body(status_code: int, content_type: str | None, data: bytes) -> HTTPError:
    media_type = parse_media_type(content_type)
    if media_type in config.settings.text_media_types:
        return HTTPError(status_code, Exception(data.decode("utf-8", errors="replace")))

    # application/json, unknown and missing media types all take this path
    try:
        payload = ErrorResponse.model_validate_json(data)
    except ValidationError as exc:
        logger.debug(
            "response_payload_invalid",
            status_code=status_code,
            media_type=media_type,
            error_count=exc.error_count(),
        )
        return HTTPError(status_code, Exception(f"Error parsing response: {exc}"))
    return HTTPError(status_code, Exception(payload.message))


def from_response(
    status_code: int,
    headers: Mapping[str, str],
    body: bytes | BinaryIO,
) -> HTTPError:
    """Build an HTTPError from a received response.

    Args:
        status_code: The response status, kept as the error's code.
        headers: Response headers; only Content-Type is consulted.
        body: The raw body, or a binary stream that is read to the end and
            closed exactly once.

    Returns:
        An HTTPError at ``status_code``. Read and decode failures are
        reported through its cause rather than raised.
    """
    if isinstance(body, bytes | bytearray | memoryview):
        data = bytes(body)
    else:
        try:
            data = body.read()
        except Exception as exc:  # e.g. http.client.IncompleteRead
            return _read_failed(status_code, exc)
        finally:
            body.close()
    return _from_body(status_code, _get_header(headers, "Content-Type"), data)


def from_httpx_response(response: httpx.Response) -> HTTPError:
    """Build an HTTPError from an httpx response, closing it afterwards."""
    try:
        data = response.read()
    except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
        return _read_failed(response.status_code, exc)
    finally:
        response.close()
    return _from_body(response.status_code, response.headers.get("Content-Type"), data)


async def from_httpx_response_async(response: httpx.Response) -> HTTPError:
    """Async variant of from_httpx_response() for AsyncClient responses."""
    try:
        data = await response.aread()
    except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
        return _read_failed(response.status_code, exc)
    finally:
        await response.aclose()
    return _from_body(response.status_code, response.headers.get("Content-Type"), data)


def raise_for_error(response: httpx.Response) -> httpx.Response:
    """Raise the response's HTTPError if it has a 4xx/5xx status.

    Works as an httpx event hook:
        httpx.Client(event_hooks={"response": [raise_for_error]})
    """
    if is_error(response.status_code):
        raise from_httpx_response(response)
    return response


async def raise_for_error_async(response: httpx.Response) -> httpx.Response:
    """Async variant of raise_for_error() for AsyncClient event hooks."""
    if is_error(response.status_code):
        raise await from_httpx_response_async(response)
    return response
