"""
HelloSign SDK — Multipart Form Encoder

The API takes a single flat form namespace and overloads it with bracketed
pseudo-array syntax (``signers[0][name]``, ``metadata[key]``, ``file[1]``).
Each request type declares an ordered layout of (attribute, form tag, rule)
entries; ``MultipartEncoder.encode`` walks the layout and collects the form
parts every rule emits.

Encoding is all-or-nothing: the part list is only handed back once every
entry has been emitted, so a missing attachment or a signer/role mismatch
never produces a partial body.
"""

from __future__ import annotations

import json
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

from hellosign_sdk.exceptions import AttachmentError, SignerRoleMismatchError
from hellosign_sdk.models import (
    CreateEmbeddedTemplateRequest,
    CustomField,
    DocumentFormField,
    EmbeddedSignatureRequest,
    EmbeddedSignatureWithTemplateRequest,
    Signer,
    SignerRole,
)


@dataclass(frozen=True)
class FormPart:
    """One named field (or named file) of a multipart body."""
    name: str
    value: Union[str, bytes]
    filename: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


Rule = Callable[["MultipartEncoder", str, Any], list[FormPart]]


@dataclass(frozen=True)
class LayoutEntry:
    attribute: str
    tag: str
    rule: Rule


class MultipartEncoder:
    """
    Turns a request model into form parts following a layout.

    Args:
        signer_roles: Template roles bound to the request's signers by
            position. Only the template signer rule reads them.
    """

    def __init__(self, signer_roles: Sequence[SignerRole] = ()):
        self.roles = list(signer_roles)

    def encode(self, request: Any, layout: Sequence[LayoutEntry]) -> list[FormPart]:
        parts: list[FormPart] = []
        for entry in layout:
            if not entry.tag:
                continue
            value = getattr(request, entry.attribute)
            parts.extend(entry.rule(self, entry.tag, value))
        return parts

    # -- emission rules -----------------------------------------------------

    def metadata(self, tag: str, value: dict[str, str]) -> list[FormPart]:
        return [FormPart(f"{tag}[{key}]", str(item)) for key, item in value.items()]

    def signers(self, tag: str, value: list[Signer]) -> list[FormPart]:
        parts = []
        for i, signer in enumerate(value):
            parts.append(FormPart(f"{tag}[{i}][email_address]", signer.email))
            parts.append(FormPart(f"{tag}[{i}][name]", signer.name))
            if signer.order != 0:
                parts.append(FormPart(f"{tag}[{i}][order]", str(signer.order)))
            if signer.pin:
                parts.append(FormPart(f"{tag}[{i}][pin]", signer.pin))
        return parts

    def template_signers(self, tag: str, value: list[Signer]) -> list[FormPart]:
        """Signers keyed by the role name at the same position.

        The PIN part keeps the numeric index; the API reads it that way.
        """
        if len(value) != len(self.roles):
            raise SignerRoleMismatchError(len(value), len(self.roles))

        parts = []
        for i, (signer, role) in enumerate(zip(value, self.roles)):
            parts.append(FormPart(f"{tag}[{role.name}][email_address]", signer.email))
            parts.append(FormPart(f"{tag}[{role.name}][name]", signer.name))
            if signer.pin:
                parts.append(FormPart(f"{tag}[{i}][pin]", signer.pin))
        return parts

    def signer_roles(self, tag: str, value: list[SignerRole]) -> list[FormPart]:
        parts = []
        for i, role in enumerate(value):
            parts.append(FormPart(f"{tag}[{i}][name]", role.name))
            if role.order != 0:
                parts.append(FormPart(f"{tag}[{i}][order]", str(role.order)))
        return parts

    def indexed(self, tag: str, value: list[str]) -> list[FormPart]:
        return [FormPart(f"{tag}[{i}]", item) for i, item in enumerate(value)]

    def json_if_nonempty(self, tag: str, value: list[list[DocumentFormField]]) -> list[FormPart]:
        if not value:
            return []
        documents = [[field.model_dump(exclude_none=True) for field in doc] for doc in value]
        return [FormPart(tag, json.dumps(documents))]

    def custom_fields(self, tag: str, value: list[CustomField]) -> list[FormPart]:
        merged = {field.name: _stringify(field.value) for field in value}
        return [FormPart(tag, json.dumps(merged, sort_keys=True))]

    def files(self, tag: str, value: list[str]) -> list[FormPart]:
        parts = []
        for i, path in enumerate(value):
            try:
                content = Path(path).read_bytes()
            except OSError as exc:
                raise AttachmentError(str(path), exc.strerror or str(exc)) from exc
            parts.append(FormPart(f"{tag}[{i}]", content, filename=Path(path).name))
        return parts

    def boolean(self, tag: str, value: bool) -> list[FormPart]:
        return [FormPart(tag, "1" if value else "0")]

    def scalar(self, tag: str, value: Union[str, int, float]) -> list[FormPart]:
        # zero values ("" and 0) are left out
        if not value:
            return []
        return [FormPart(tag, str(value))]


def _stringify(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 450.0 is sent as "450"
        return str(int(value))
    return str(value)


def _entry(attribute: str, rule: Rule) -> LayoutEntry:
    # the API's form tags match the model attribute names
    return LayoutEntry(attribute, attribute, rule)


EMBEDDED_SIGNATURE_REQUEST_LAYOUT = (
    _entry("test_mode", MultipartEncoder.boolean),
    _entry("client_id", MultipartEncoder.scalar),
    _entry("file_url", MultipartEncoder.indexed),
    _entry("file", MultipartEncoder.files),
    _entry("title", MultipartEncoder.scalar),
    _entry("subject", MultipartEncoder.scalar),
    _entry("message", MultipartEncoder.scalar),
    _entry("signing_redirect_url", MultipartEncoder.scalar),
    _entry("signers", MultipartEncoder.signers),
    _entry("cc_email_addresses", MultipartEncoder.indexed),
    _entry("use_text_tags", MultipartEncoder.boolean),
    _entry("hide_text_tags", MultipartEncoder.boolean),
    _entry("metadata", MultipartEncoder.metadata),
    _entry("allow_decline", MultipartEncoder.boolean),
    _entry("show_preview", MultipartEncoder.boolean),
    _entry("form_fields_per_document", MultipartEncoder.json_if_nonempty),
)

EMBEDDED_SIGNATURE_WITH_TEMPLATE_REQUEST_LAYOUT = (
    _entry("test_mode", MultipartEncoder.boolean),
    _entry("client_id", MultipartEncoder.scalar),
    _entry("template_id", MultipartEncoder.scalar),
    _entry("title", MultipartEncoder.scalar),
    _entry("subject", MultipartEncoder.scalar),
    _entry("message", MultipartEncoder.scalar),
    _entry("signing_redirect_url", MultipartEncoder.scalar),
    _entry("signers", MultipartEncoder.template_signers),
    _entry("cc_email_addresses", MultipartEncoder.indexed),
    _entry("custom_fields", MultipartEncoder.custom_fields),
    _entry("metadata", MultipartEncoder.metadata),
    _entry("allow_decline", MultipartEncoder.boolean),
)

CREATE_EMBEDDED_TEMPLATE_REQUEST_LAYOUT = (
    _entry("test_mode", MultipartEncoder.boolean),
    _entry("client_id", MultipartEncoder.scalar),
    _entry("file_url", MultipartEncoder.indexed),
    _entry("file", MultipartEncoder.files),
    _entry("title", MultipartEncoder.scalar),
    _entry("subject", MultipartEncoder.scalar),
    _entry("message", MultipartEncoder.scalar),
    _entry("signer_roles", MultipartEncoder.signer_roles),
    _entry("cc_roles", MultipartEncoder.indexed),
    _entry("metadata", MultipartEncoder.metadata),
    _entry("show_preview", MultipartEncoder.boolean),
)


def encode_embedded_signature_request(request: EmbeddedSignatureRequest) -> list[FormPart]:
    return MultipartEncoder().encode(request, EMBEDDED_SIGNATURE_REQUEST_LAYOUT)


def encode_embedded_signature_with_template_request(
    request: EmbeddedSignatureWithTemplateRequest,
    signer_roles: Sequence[SignerRole],
) -> list[FormPart]:
    """Encode a template-based request; fails fast on a signer/role count mismatch."""
    if len(request.signers) != len(signer_roles):
        raise SignerRoleMismatchError(len(request.signers), len(signer_roles))
    encoder = MultipartEncoder(signer_roles)
    return encoder.encode(request, EMBEDDED_SIGNATURE_WITH_TEMPLATE_REQUEST_LAYOUT)


def encode_embedded_template_request(request: CreateEmbeddedTemplateRequest) -> list[FormPart]:
    return MultipartEncoder().encode(request, CREATE_EMBEDDED_TEMPLATE_REQUEST_LAYOUT)


def as_httpx_files(parts: Sequence[FormPart]) -> list[tuple[str, tuple]]:
    """
    Convert form parts to the ordered ``files=`` list httpx writes as a
    multipart/form-data body. Plain fields get no filename so they are sent
    as ordinary form values.
    """
    files: list[tuple[str, tuple]] = []
    for part in parts:
        if part.is_file:
            content_type = mimetypes.guess_type(part.filename)[0] or "application/octet-stream"
            files.append((part.name, (part.filename, part.value, content_type)))
        else:
            files.append((part.name, (None, part.value)))
    return files
