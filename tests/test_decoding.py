"""
Tests for response decoders, response models and client configuration.
"""

import httpx
import pytest
from pydantic import ValidationError

from hellosign_sdk.config import ClientConfig
from hellosign_sdk.decoding import (
    decode_file_url,
    decode_sign_url,
    decode_signature_request,
    decode_signature_request_list,
    decode_template_draft,
    decode_template_list,
)
from hellosign_sdk.exceptions import DecodeError, HelloSignError
from hellosign_sdk.models import Signature, SignatureRequest


def response(json=None, content=None):
    if json is not None:
        return httpx.Response(200, json=json)
    return httpx.Response(200, content=content)


class TestDecoders:
    def test_absent_fields_are_zero_values(self):
        result = decode_signature_request(response(json={"signature_request": {}}))
        assert result == SignatureRequest()
        assert result.signatures == []
        assert result.metadata == {}
        assert result.is_complete is False

    def test_missing_envelope_is_zero_value(self):
        assert decode_sign_url(response(json={})).sign_url == ""

    def test_null_fields_are_zero_values(self):
        signature = Signature.model_validate({
            "signature_id": "sig-1",
            "order": None,
            "signed_at": None,
            "decline_reason": None,
        })
        assert signature.order == 0
        assert signature.signed_at == 0
        assert signature.decline_reason == ""

    def test_unknown_keys_ignored(self):
        result = decode_signature_request(response(json={
            "signature_request": {"signature_request_id": "abc", "brand_new_field": 1},
            "warnings": [],
        }))
        assert result.signature_request_id == "abc"

    def test_signature_request_list(self):
        result = decode_signature_request_list(response(json={
            "list_info": {"page": 1, "num_pages": 3, "num_results": 41, "page_size": 20},
            "signature_requests": [{"signature_request_id": "a"}, {"signature_request_id": "b"}],
        }))
        assert result.list_info.num_pages == 3
        assert [r.signature_request_id for r in result.signature_requests] == ["a", "b"]

    def test_file_url(self):
        result = decode_file_url(response(json={"file_url": "https://x/y.zip", "expires_at": 5}))
        assert result.file_url == "https://x/y.zip"
        assert result.expires_at == 5

    def test_template_list_and_draft(self):
        templates = decode_template_list(response(json={"templates": [{"template_id": "t"}]}))
        assert templates.templates[0].template_id == "t"
        assert templates.list_info.num_results == 0

        draft = decode_template_draft(response(json={"template": {"template_id": "t", "edit_url": "u"}}))
        assert (draft.template_id, draft.edit_url, draft.expires_at) == ("t", "u", 0)

    def test_malformed_json(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_signature_request(response(content=b"{not json"))
        assert isinstance(exc_info.value, HelloSignError)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_empty_body(self):
        with pytest.raises(DecodeError):
            decode_signature_request(response(content=b""))

    def test_unexpected_node_type(self):
        with pytest.raises(DecodeError):
            decode_signature_request_list(response(json={"signature_requests": {"a": 1}}))


class TestClientConfig:
    def test_url_for(self):
        config = ClientConfig(api_key="k", base_url="https://api.hellosign.com/v3")
        assert config.base_url == "https://api.hellosign.com/v3/"
        assert config.url_for("signature_request/list") == "https://api.hellosign.com/v3/signature_request/list"
        assert config.url_for("/template/t1") == "https://api.hellosign.com/v3/template/t1"

    def test_frozen(self):
        config = ClientConfig(api_key="k")
        with pytest.raises(ValidationError):
            config.api_key = "other"
