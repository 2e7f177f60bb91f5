"""Environment-backed settings primitives for :mod:`pstryk`."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["DEFAULT_BASE_URL", "PstrykSettings", "get_settings"]

DEFAULT_BASE_URL = "https://api.pstryk.pl"


class PstrykSettings(BaseSettings):
    """Expose environment-derived configuration for the Pstryk client.

    Attributes:
        api_token: Integration token issued in the Pstryk mobile app. The
            client prefixes it with ``sk-`` when building the
            ``Authorization`` header.
        base_url: Root URL of the Pstryk API. Defaults to the production host.
    """

    api_token: str | None = Field(default=None, alias="PSTRYK_API_TOKEN")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="PSTRYK_BASE_URL")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    @field_validator("api_token", mode="before")
    @classmethod
    def _blank_token_is_unset(cls, value: object) -> str | None:
        """Treat blank tokens as missing."""

        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("base_url", mode="before")
    @classmethod
    def _blank_base_url_is_default(cls, value: object) -> str:
        if value is None or not str(value).strip():
            return DEFAULT_BASE_URL
        return str(value).strip()


def get_settings() -> PstrykSettings:
    """Return a :class:`PstrykSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return PstrykSettings()
