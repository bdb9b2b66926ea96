"""
HelloSign SDK
Synchronous client for the HelloSign v3 signature API.
"""

import logging

from hellosign_sdk.client import HelloSignClient
from hellosign_sdk.config import DEFAULT_BASE_URL, ClientConfig
from hellosign_sdk.encoding import FormPart
from hellosign_sdk.exceptions import (
    APIError,
    AttachmentError,
    DecodeError,
    EncodingError,
    HelloSignError,
    SignerRoleMismatchError,
    TransportError,
)
from hellosign_sdk.models import (
    CreateEmbeddedTemplateRequest,
    CustomField,
    DocumentFormField,
    EmbeddedSignatureRequest,
    EmbeddedSignatureWithTemplateRequest,
    EmbeddedTemplateDraft,
    EmbeddedTemplateEditURL,
    FileResponse,
    ListInfo,
    ListSignaturesResponse,
    ListTemplatesResponse,
    Signature,
    SignatureRequest,
    Signer,
    SignerRole,
    SignURLResponse,
    Template,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "AttachmentError",
    "ClientConfig",
    "CreateEmbeddedTemplateRequest",
    "CustomField",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "DocumentFormField",
    "EmbeddedSignatureRequest",
    "EmbeddedSignatureWithTemplateRequest",
    "EmbeddedTemplateDraft",
    "EmbeddedTemplateEditURL",
    "EncodingError",
    "FileResponse",
    "FormPart",
    "HelloSignClient",
    "HelloSignError",
    "ListInfo",
    "ListSignaturesResponse",
    "ListTemplatesResponse",
    "Signature",
    "SignatureRequest",
    "SignURLResponse",
    "Signer",
    "SignerRole",
    "SignerRoleMismatchError",
    "Template",
    "TransportError",
]
