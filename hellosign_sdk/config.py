"""
HelloSign SDK — Client Configuration
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://api.hellosign.com/v3/"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """Read-only settings shared by every call a client makes."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def _single_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") + "/"

    def url_for(self, path: str) -> str:
        """Join an endpoint path (e.g. "signature_request/list") onto base_url."""
        return self.base_url + path.lstrip("/")
