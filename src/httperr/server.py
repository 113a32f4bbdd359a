"""Write values and errors as JSON responses.

respond_json() is the single place where an arbitrary exception is mapped to
a status code and the standard error body. Routers and exception handlers
both go through it.
"""

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, Response

from httperr.exceptions import HTTPError, SupportsJSON, status_code_of

JSON_MEDIA_TYPE = "application/json"


def respond_json(value: object) -> Response:
    """Build a JSON response for ``value``.

    Exceptions use their ``status_code`` when they have one and 500 (see
    Settings.default_status_code) otherwise. An exception that serializes
    itself via ``to_json()`` is written as is; any other exception is wrapped
    in HTTPError first. Non-exception values are written with status 200.
    """
    if isinstance(value, BaseException):
        code = status_code_of(value)
        if isinstance(value, SupportsJSON):
            body = value.to_json()
        else:
            body = HTTPError(code, value).to_json()
        return Response(content=body, status_code=code, media_type=JSON_MEDIA_TYPE)

    return JSONResponse(content=jsonable_encoder(value), status_code=200)
