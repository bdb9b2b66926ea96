"""
HelloSign SDK — HTTP Transport
Synchronous httpx wrapper: authenticates, sends, and turns failures into
TransportError / APIError.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from hellosign_sdk.config import ClientConfig
from hellosign_sdk.encoding import FormPart, as_httpx_files
from hellosign_sdk.exceptions import APIError, TransportError

logger = logging.getLogger(__name__)


class Transport:
    """
    Executes one request per call against the configured base URL.

    Args:
        config: API key, base URL and timeout.
        http_client: Optional pre-built httpx.Client (e.g. with a mock
            transport). When omitted the transport creates and owns one.
    """

    def __init__(self, config: ClientConfig, http_client: Optional[httpx.Client] = None):
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=config.timeout)

    def request(
        self,
        method: str,
        path: str,
        parts: Sequence[FormPart] = (),
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send ``parts`` as a multipart/form-data body (if any) and return the
        fully read response.

        Raises:
            TransportError: the request could not be completed.
            APIError: the API answered with a non-2xx status.
        """
        url = self.config.url_for(path)
        files = as_httpx_files(parts) if parts else None

        logger.debug("%s %s (%d form parts)", method, path, len(parts))
        try:
            resp = self._client.request(
                method,
                url,
                files=files,
                params=params,
                auth=(self.config.api_key, ""),
                timeout=self.config.timeout,
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, resp.status_code)
        if not resp.is_success:
            raise _api_error(resp)
        return resp

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


def _api_error(resp: httpx.Response) -> APIError:
    """Build an APIError from the {"error": {"error_name", "error_msg"}} envelope."""
    error_name = ""
    error_msg = resp.reason_phrase
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error_name = str(body["error"].get("error_name") or "")
        error_msg = str(body["error"].get("error_msg") or error_msg)

    return APIError(resp.status_code, error_name, error_msg, response=resp)
