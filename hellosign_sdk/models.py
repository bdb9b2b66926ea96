"""
HelloSign SDK — Data Models

Request models are built by the caller and encoded as multipart forms.
Response models mirror the JSON the API returns; every field has a zero
value default so absent or null keys decode cleanly.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationInfo, field_validator


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class Signer(BaseModel):
    """A person who must sign the documents."""
    email: str
    name: str
    order: int = 0          # 0 = unspecified
    pin: str = ""           # empty = no PIN required


class SignerRole(BaseModel):
    """Named template position; bound to a Signer by list position."""
    name: str
    order: int = 0


class CustomField(BaseModel):
    """Value merged into a template's custom field of the same name."""
    name: str
    value: Union[str, int, float, bool] = ""


class DocumentFormField(BaseModel):
    """A form field placed on one page of one document."""
    api_id: str
    name: str = ""
    type: str                # text | checkbox | signature | date_signed | ...
    x: int
    y: int
    width: int
    height: int
    required: bool = False
    signer: Union[int, str]  # signer index, or "sender"
    page: Optional[int] = None


class EmbeddedSignatureRequest(BaseModel):
    """Payload for POST signature_request/create_embedded."""
    test_mode: bool = False
    client_id: str = ""
    file_url: list[str] = []
    file: list[str] = []     # local paths
    title: str = ""
    subject: str = ""
    message: str = ""
    signing_redirect_url: str = ""
    signers: list[Signer] = []
    cc_email_addresses: list[str] = []
    use_text_tags: bool = False
    hide_text_tags: bool = False
    metadata: dict[str, str] = {}
    allow_decline: bool = False
    show_preview: bool = False
    form_fields_per_document: list[list[DocumentFormField]] = []


class EmbeddedSignatureWithTemplateRequest(BaseModel):
    """Payload for POST signature_request/create_embedded_with_template."""
    test_mode: bool = False
    client_id: str = ""
    template_id: str = ""
    title: str = ""
    subject: str = ""
    message: str = ""
    signing_redirect_url: str = ""
    signers: list[Signer] = []
    cc_email_addresses: list[str] = []
    custom_fields: list[CustomField] = []
    metadata: dict[str, str] = {}
    allow_decline: bool = False


class CreateEmbeddedTemplateRequest(BaseModel):
    """Payload for POST template/create_embedded_draft."""
    test_mode: bool = False
    client_id: str = ""
    file_url: list[str] = []
    file: list[str] = []
    title: str = ""
    subject: str = ""
    message: str = ""
    signer_roles: list[SignerRole] = []
    cc_roles: list[str] = []
    metadata: dict[str, str] = {}
    show_preview: bool = False


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class APIModel(BaseModel):
    """Base for decoded responses: JSON null decodes to the field default."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Signature(APIModel):
    """A signer as echoed back by the API, with its signing status."""
    signature_id: str = ""
    signer_email_address: str = ""
    signer_name: str = ""
    signer_role: str = ""
    order: int = 0
    status_code: str = ""    # awaiting_signature | signed | declined | ...
    signed_at: int = 0
    last_viewed_at: int = 0
    last_reminded_at: int = 0
    has_pin: bool = False
    decline_reason: str = ""
    error: str = ""


class ResponseCustomField(APIModel):
    name: str = ""
    type: str = ""
    value: Any = None
    required: bool = False
    api_id: str = ""
    editor: str = ""


class SignatureRequest(APIModel):
    """Current state of a signature request."""
    signature_request_id: str = ""
    test_mode: bool = False
    title: str = ""
    original_title: str = ""
    subject: str = ""
    message: str = ""
    metadata: dict[str, Any] = {}
    created_at: int = 0
    is_complete: bool = False
    is_declined: bool = False
    has_error: bool = False
    files_url: str = ""
    signing_url: str = ""
    details_url: str = ""
    requester_email_address: str = ""
    signing_redirect_url: str = ""
    cc_email_addresses: list[str] = []
    custom_fields: list[ResponseCustomField] = []
    signatures: list[Signature] = []


class ListInfo(APIModel):
    page: int = 0
    num_pages: int = 0
    num_results: int = 0
    page_size: int = 0


class ListSignaturesResponse(APIModel):
    """Result of GET signature_request/list."""
    list_info: ListInfo = ListInfo()
    signature_requests: list[SignatureRequest] = []


class SignURLResponse(APIModel):
    """Embedded signing session for one signature."""
    sign_url: str = ""
    expires_at: int = 0


class FileResponse(APIModel):
    """Temporary download link for a signature request's documents."""
    file_url: str = ""
    expires_at: int = 0


class TemplateDocument(APIModel):
    name: str = ""
    index: int = 0


class TemplateSignerRole(APIModel):
    name: str = ""
    order: int = 0


class TemplateCCRole(APIModel):
    name: str = ""


class Template(APIModel):
    """A reusable template and the roles it defines."""
    template_id: str = ""
    title: str = ""
    message: str = ""
    metadata: dict[str, Any] = {}
    signer_roles: list[TemplateSignerRole] = []
    cc_roles: list[TemplateCCRole] = []
    documents: list[TemplateDocument] = []
    custom_fields: list[ResponseCustomField] = []
    is_creator: bool = False
    is_embedded: bool = False
    can_edit: bool = False
    is_locked: bool = False
    updated_at: int = 0


class ListTemplatesResponse(APIModel):
    """Result of GET template/list."""
    list_info: ListInfo = ListInfo()
    templates: list[Template] = []


class EmbeddedTemplateEditURL(APIModel):
    edit_url: str = ""
    expires_at: int = 0


class EmbeddedTemplateDraft(APIModel):
    """Result of POST template/create_embedded_draft."""
    template_id: str = ""
    edit_url: str = ""
    expires_at: int = 0


# Wire envelopes

class SignatureRequestEnvelope(APIModel):
    signature_request: SignatureRequest = SignatureRequest()


class EmbeddedSignURLEnvelope(APIModel):
    embedded: SignURLResponse = SignURLResponse()


class EmbeddedEditURLEnvelope(APIModel):
    embedded: EmbeddedTemplateEditURL = EmbeddedTemplateEditURL()


class TemplateEnvelope(APIModel):
    template: Template = Template()


class TemplateDraftEnvelope(APIModel):
    template: EmbeddedTemplateDraft = EmbeddedTemplateDraft()
