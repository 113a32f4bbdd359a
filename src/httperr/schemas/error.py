"""Error response schema.

Every error body on the wire uses the same flat shape:
{"message": "...", "error": "...", "statusCode": 500}.
HTTPError.to_json() produces it and the client helpers parse it back.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ErrorResponse(BaseModel):
    """Wire payload for an HTTP error.

    ``message`` is the human-readable cause, ``error`` the standard reason
    phrase and ``status_code`` the numeric code (``statusCode`` on the wire).
    Fields default to empty values so that partial payloads from other
    services still decode; unknown fields are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: str = ""
    error: str = ""
    status_code: int = Field(default=0, alias="statusCode")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat a null body or null fields as missing."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
