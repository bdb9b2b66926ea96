"""
Exception hierarchy for the HelloSign SDK.

All exceptions raised by the package inherit from HelloSignError.
"""

from __future__ import annotations

from typing import Optional

import httpx


class HelloSignError(Exception):
    """Base exception for all HelloSign SDK errors."""
    pass


# Local validation errors (raised before any network call)
class EncodingError(HelloSignError):
    """Raised when a request object cannot be turned into a request body."""
    pass


class SignerRoleMismatchError(EncodingError):
    """Raised when a template request has a different number of signers and roles."""

    def __init__(self, signer_count: int, role_count: int):
        self.signer_count = signer_count
        self.role_count = role_count
        super().__init__(
            "the number of signers and roles must match. "
            f"[SignerRoles: {role_count}, Signers: {signer_count}]"
        )


class AttachmentError(EncodingError):
    """Raised when a local attachment file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"cannot read attachment {path!r}: {reason}")


# Transport errors
class TransportError(HelloSignError):
    """Raised when the HTTP round trip itself fails."""
    pass


class APIError(TransportError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        error_name: str = "",
        error_msg: str = "",
        response: Optional[httpx.Response] = None,
    ):
        self.status_code = status_code
        self.error_name = error_name
        self.error_msg = error_msg
        self.response = response
        detail = f"{error_name}: {error_msg}" if error_name else error_msg
        super().__init__(f"HTTP {status_code} {detail}".rstrip())


# Decode errors
class DecodeError(HelloSignError):
    """Raised when a response body is not the JSON shape that was expected."""
    pass
