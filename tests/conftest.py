"""
Pytest configuration and shared fixtures for the HelloSign SDK tests.

HTTP traffic goes through httpx.MockTransport backed by FakeAPI, which
replays queued responses and records every request it receives.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import pytest

from hellosign_sdk import HelloSignClient

API_KEY = "test-api-key"


class FakeAPI:
    """Queue of canned responses plus a log of the requests that consumed them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(
        self,
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        if json is not None:
            self._responses.append(httpx.Response(status_code, json=json))
        else:
            self._responses.append(httpx.Response(status_code, content=content or b""))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(
                404, json={"error": {"error_name": "not_found", "error_msg": "not mocked"}}
            )
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(api):
    http = httpx.Client(transport=httpx.MockTransport(api.handle))
    with HelloSignClient(API_KEY, http_client=http) as hs:
        yield hs
    http.close()


@pytest.fixture
def signature_request_payload() -> dict:
    return {
        "signature_request": {
            "signature_request_id": "fa5c8a0b0f492d768749333ad6fcc214c111e967",
            "test_mode": True,
            "title": "NDA with Acme Co.",
            "original_title": "NDA with Acme Co.",
            "subject": "The NDA we talked about",
            "message": "Please sign this NDA and then we can discuss more.",
            "metadata": {"custom_id": "1234"},
            "created_at": 1570471067,
            "is_complete": False,
            "is_declined": False,
            "has_error": False,
            "files_url": "https://api.hellosign.com/v3/signature_request/files/fa5c8a0b",
            "signing_url": None,
            "details_url": "https://app.hellosign.com/home/manage?guid=fa5c8a0b",
            "requester_email_address": "me@hellosign.com",
            "signing_redirect_url": None,
            "cc_email_addresses": ["lawyer@hellosign.com"],
            "custom_fields": [],
            "signatures": [
                {
                    "signature_id": "78caf2a1d01cd39cea2bc1cbb340dac3",
                    "signer_email_address": "alice@x.com",
                    "signer_name": "Alice",
                    "signer_role": None,
                    "order": None,
                    "status_code": "awaiting_signature",
                    "signed_at": None,
                    "last_viewed_at": None,
                    "last_reminded_at": None,
                    "has_pin": False,
                    "decline_reason": None,
                    "error": None,
                },
                {
                    "signature_id": "616629ed37f8588d28600be17ab5d6b7",
                    "signer_email_address": "bob@x.com",
                    "signer_name": "Bob",
                    "order": 2,
                    "status_code": "signed",
                    "signed_at": 1570471100,
                    "has_pin": True,
                },
            ],
        }
    }
