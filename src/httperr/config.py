from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Pydantic Settings reads env vars prefixed with HTTPERR_ (case-insensitive),
    e.g. HTTPERR_DEFAULT_STATUS_CODE=502. In development it also reads from
    a .env file if present.
    """

    # Status written for errors that carry no status_code of their own
    default_status_code: int = 500

    # Media types whose response body is used verbatim as the error message.
    # Everything else is decoded as an ErrorResponse payload.
    text_media_types: list[str] = Field(
        default_factory=lambda: ["text/plain", "text/html", "text/xml"]
    )

    model_config = SettingsConfigDict(
        env_prefix="HTTPERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
