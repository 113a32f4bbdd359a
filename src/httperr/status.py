"""HTTP status code classification.

Pure range checks on integer codes plus the standard reason phrase lookup.
Codes outside 100-599 are accepted and simply match no class.
"""

from http import HTTPStatus


def status_text(code: int) -> str:
    """Return the standard reason phrase for ``code``, or "" if unknown."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def is_informational(code: int) -> bool:
    """1xx."""
    return HTTPStatus.CONTINUE <= code < HTTPStatus.OK


def is_success(code: int) -> bool:
    """2xx."""
    return HTTPStatus.OK <= code < HTTPStatus.MULTIPLE_CHOICES


def is_redirect(code: int) -> bool:
    """3xx."""
    return HTTPStatus.MULTIPLE_CHOICES <= code < HTTPStatus.BAD_REQUEST


def is_client_error(code: int) -> bool:
    """4xx."""
    return HTTPStatus.BAD_REQUEST <= code < HTTPStatus.INTERNAL_SERVER_ERROR


def is_server_error(code: int) -> bool:
    """5xx."""
    return HTTPStatus.INTERNAL_SERVER_ERROR <= code < 600


def is_error(code: int) -> bool:
    """Any 4xx or 5xx code."""
    return HTTPStatus.BAD_REQUEST <= code < 600
