"""
HelloSign SDK — Response Decoders

Each decoder validates a response body against its wire envelope and
returns the typed result inside it.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from hellosign_sdk.exceptions import DecodeError
from hellosign_sdk.models import (
    EmbeddedEditURLEnvelope,
    EmbeddedSignURLEnvelope,
    EmbeddedTemplateDraft,
    EmbeddedTemplateEditURL,
    FileResponse,
    ListSignaturesResponse,
    ListTemplatesResponse,
    SignatureRequest,
    SignatureRequestEnvelope,
    SignURLResponse,
    Template,
    TemplateDraftEnvelope,
    TemplateEnvelope,
)

M = TypeVar("M", bound=BaseModel)


def decode(response: httpx.Response, model: type[M]) -> M:
    """Validate the full response body as ``model``; raise DecodeError on mismatch."""
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(
            f"cannot decode {model.__name__}: {exc.error_count()} error(s)"
        ) from exc


def decode_signature_request(response: httpx.Response) -> SignatureRequest:
    return decode(response, SignatureRequestEnvelope).signature_request


def decode_signature_request_list(response: httpx.Response) -> ListSignaturesResponse:
    return decode(response, ListSignaturesResponse)


def decode_sign_url(response: httpx.Response) -> SignURLResponse:
    return decode(response, EmbeddedSignURLEnvelope).embedded


def decode_file_url(response: httpx.Response) -> FileResponse:
    return decode(response, FileResponse)


def decode_template(response: httpx.Response) -> Template:
    return decode(response, TemplateEnvelope).template


def decode_template_list(response: httpx.Response) -> ListTemplatesResponse:
    return decode(response, ListTemplatesResponse)


def decode_template_edit_url(response: httpx.Response) -> EmbeddedTemplateEditURL:
    return decode(response, EmbeddedEditURLEnvelope).embedded


def decode_template_draft(response: httpx.Response) -> EmbeddedTemplateDraft:
    return decode(response, TemplateDraftEnvelope).template
