"""
HelloSign SDK — Client
Thin synchronous wrapper over the HelloSign v3 REST API.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import httpx

from hellosign_sdk.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from hellosign_sdk.decoding import (
    decode_file_url,
    decode_sign_url,
    decode_signature_request,
    decode_signature_request_list,
    decode_template,
    decode_template_draft,
    decode_template_edit_url,
    decode_template_list,
)
from hellosign_sdk.encoding import (
    FormPart,
    encode_embedded_signature_request,
    encode_embedded_signature_with_template_request,
    encode_embedded_template_request,
)
from hellosign_sdk.models import (
    CreateEmbeddedTemplateRequest,
    EmbeddedSignatureRequest,
    EmbeddedSignatureWithTemplateRequest,
    EmbeddedTemplateDraft,
    EmbeddedTemplateEditURL,
    FileResponse,
    ListSignaturesResponse,
    ListTemplatesResponse,
    SignatureRequest,
    SignerRole,
    SignURLResponse,
    Template,
)
from hellosign_sdk.transport import Transport


class HelloSignClient:
    """
    Client for the HelloSign signature API.

    Creates embedded signature requests (from uploaded files or from a
    template), inspects and manages existing requests, downloads signed
    documents, and manages embedded templates.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            api_key: HelloSign API key, sent as the basic-auth user name
            base_url: API root (default "https://api.hellosign.com/v3/")
            timeout: HTTP request timeout in seconds
            http_client: Optional httpx.Client to send requests through
        """
        self.config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        self._transport = Transport(self.config, http_client=http_client)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> HelloSignClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Signature requests
    # ------------------------------------------------------------------

    def create_embedded_signature_request(
        self,
        request: EmbeddedSignatureRequest,
    ) -> SignatureRequest:
        """
        Create a signature request to be signed inside your own app.

        Args:
            request: Signers, documents (local paths and/or URLs) and options

        Returns:
            The created SignatureRequest.

        Raises:
            AttachmentError: a local file in request.file cannot be read
        """
        parts = encode_embedded_signature_request(request)
        resp = self._transport.request("POST", "signature_request/create_embedded", parts)
        return decode_signature_request(resp)

    def create_embedded_signature_request_with_template(
        self,
        request: EmbeddedSignatureWithTemplateRequest,
        signer_roles: Sequence[SignerRole],
    ) -> SignatureRequest:
        """
        Create an embedded signature request from a template.

        Args:
            request: Template id, signers and options
            signer_roles: Template roles; signer i fills signer_roles[i]

        Returns:
            The created SignatureRequest.

        Raises:
            SignerRoleMismatchError: len(request.signers) != len(signer_roles)
        """
        parts = encode_embedded_signature_with_template_request(request, signer_roles)
        resp = self._transport.request(
            "POST", "signature_request/create_embedded_with_template", parts
        )
        return decode_signature_request(resp)

    def get_signature_request(self, signature_request_id: str) -> SignatureRequest:
        """Get a SignatureRequest including the current status of each signer."""
        resp = self._transport.request("GET", f"signature_request/{signature_request_id}")
        return decode_signature_request(resp)

    def list_signature_requests(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ListSignaturesResponse:
        """List the signature requests (inbound and outbound) you can access."""
        resp = self._transport.request(
            "GET", "signature_request/list", params=_page_params(page, page_size)
        )
        return decode_signature_request_list(resp)

    def update_signature_request(
        self,
        signature_request_id: str,
        signature_id: str,
        email: str,
    ) -> SignatureRequest:
        """
        Update the email address of one signer on a signature request.

        Args:
            signature_request_id: Request to update
            signature_id: Signature (signer) whose address changes
            email: New email address
        """
        parts = [
            FormPart("signature_id", signature_id),
            FormPart("email_address", email),
        ]
        resp = self._transport.request(
            "POST", f"signature_request/update/{signature_request_id}", parts
        )
        return decode_signature_request(resp)

    def cancel_signature_request(self, signature_request_id: str) -> httpx.Response:
        """Cancel an incomplete signature request. Not reversible."""
        return self._transport.request("POST", f"signature_request/cancel/{signature_request_id}")

    def delete_signature_request(self, signature_request_id: str) -> httpx.Response:
        """Remove your access to a completed signature request. Not reversible."""
        return self._transport.request("POST", f"signature_request/remove/{signature_request_id}")

    def get_embedded_sign_url(self, signature_id: str) -> SignURLResponse:
        """Retrieve the embedded signing URL for one signer."""
        resp = self._transport.request("GET", f"embedded/sign_url/{signature_id}")
        return decode_sign_url(resp)

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def get_files(self, signature_request_id: str, file_type: str = "pdf") -> bytes:
        """
        Download the current documents of a signature request.

        Args:
            signature_request_id: Request whose documents to fetch
            file_type: "pdf" for one merged document, "zip" for individual files

        Returns:
            The raw PDF or ZIP bytes.
        """
        resp = self._transport.request(
            "GET",
            f"signature_request/files/{signature_request_id}",
            params={"file_type": file_type},
        )
        return resp.content

    def get_pdf(self, signature_request_id: str) -> bytes:
        return self.get_files(signature_request_id, "pdf")

    def get_files_url(self, signature_request_id: str, file_type: str = "pdf") -> FileResponse:
        """Get a temporary download URL instead of the document bytes."""
        resp = self._transport.request(
            "GET",
            f"signature_request/files/{signature_request_id}",
            params={"file_type": file_type, "get_url": "1"},
        )
        return decode_file_url(resp)

    def save_file(
        self,
        signature_request_id: str,
        file_type: str,
        dest_path: Union[str, Path],
    ) -> os.stat_result:
        """Download documents to ``dest_path`` and return the written file's stat."""
        content = self.get_files(signature_request_id, file_type)
        dest = Path(dest_path)
        dest.write_bytes(content)
        return dest.stat()

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def get_template(self, template_id: str) -> Template:
        resp = self._transport.request("GET", f"template/{template_id}")
        return decode_template(resp)

    def list_templates(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ListTemplatesResponse:
        """List the templates you can access."""
        resp = self._transport.request(
            "GET", "template/list", params=_page_params(page, page_size)
        )
        return decode_template_list(resp)

    def create_embedded_template(
        self,
        request: CreateEmbeddedTemplateRequest,
    ) -> EmbeddedTemplateDraft:
        """
        Create a template draft to be finished in your app via its edit URL.

        Returns:
            EmbeddedTemplateDraft with template_id, edit_url and expires_at.
        """
        parts = encode_embedded_template_request(request)
        resp = self._transport.request("POST", "template/create_embedded_draft", parts)
        return decode_template_draft(resp)

    def get_embedded_template_edit_url(self, template_id: str) -> EmbeddedTemplateEditURL:
        resp = self._transport.request("GET", f"embedded/edit_url/{template_id}")
        return decode_template_edit_url(resp)

    def delete_template(self, template_id: str) -> httpx.Response:
        """Delete a template. Not reversible."""
        return self._transport.request("POST", f"template/delete/{template_id}")


def _page_params(page: Optional[int], page_size: Optional[int]) -> Optional[dict[str, int]]:
    params = {}
    if page is not None:
        params["page"] = page
    if page_size is not None:
        params["page_size"] = page_size
    return params or None
