"""Testes dos modelos de requisição de mensagem."""

from __future__ import annotations

import pydantic
import pytest

from tests.fakes.fake_w_api import VALID_PHONE, build_request
from w_api_sdk.models.requests import (
    MESSAGE_REQUEST_TYPES,
    PHONE_FORMAT_MESSAGE,
    AudioMessageRequest,
    DocumentMessageRequest,
    ImageMessageRequest,
    MessageRequest,
    TextMessageRequest,
    VideoMessageRequest,
    parse_message_request,
)


class TestPhone:
    """Formato DDI + DDD + número."""

    @pytest.mark.parametrize(
        "phone",
        ["5511999999999", "551199999999", "12125550100123", "35121234567890"],
    )
    def test_valid_phones(self, phone: str) -> None:
        assert TextMessageRequest(phone=phone, message="oi").phone == phone

    @pytest.mark.parametrize(
        "phone",
        [
            "0511999999999",
            "551199",
            "55119999999999999",
            "+5511999999999",
            "55 11 99999999",
            "5511999999999\n",
            "\u0665\u0665\u0661\u0661\u0669\u0669\u0669\u0669\u0669\u0669\u0669\u0669\u0669",
        ],
    )
    def test_invalid_phones(self, phone: str) -> None:
        with pytest.raises(pydantic.ValidationError, match="Phone must be in format"):
            TextMessageRequest(phone=phone, message="oi")

    def test_empty_phone(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="Phone can not be empty!"):
            TextMessageRequest(phone="", message="oi")

    def test_format_message_mentions_example(self) -> None:
        assert "5511999999999" in PHONE_FORMAT_MESSAGE


class TestSerialization:
    """Corpo JSON com as chaves exatas da API."""

    def test_text_with_delay(self) -> None:
        request = TextMessageRequest(phone=VALID_PHONE, message="Olá!", delay_message=3)
        assert request.to_payload() == {
            "phone": VALID_PHONE,
            "delayMessage": 3,
            "message": "Olá!",
        }

    def test_delay_accepts_alias(self) -> None:
        request = TextMessageRequest(phone=VALID_PHONE, message="Olá!", delayMessage=5)
        assert request.delay_message == 5

    def test_omits_unset_delay_and_kind(self) -> None:
        payload = build_request("image").to_payload()
        assert payload == {"phone": VALID_PHONE, "image": "https://cdn.example.com/foto.png"}

    def test_document_has_document_and_extension(self) -> None:
        payload = build_request("document").to_payload()
        assert payload == {
            "phone": VALID_PHONE,
            "document": "https://cdn.example.com/boleto.pdf",
            "extension": "pdf",
        }

    @pytest.mark.parametrize("kind", ["audio", "video"])
    def test_media_field_named_after_kind(self, kind: str) -> None:
        assert kind in build_request(kind).to_payload()


class TestRequiredPayloadFields:
    """Campo específico de cada tipo é obrigatório e não vazio."""

    @pytest.mark.parametrize(
        ("model", "field", "label"),
        [
            (TextMessageRequest, "message", "Message"),
            (ImageMessageRequest, "image", "Image"),
            (AudioMessageRequest, "audio", "Audio"),
            (VideoMessageRequest, "video", "Video"),
        ],
    )
    def test_empty_payload_field_fails(self, model: type, field: str, label: str) -> None:
        with pytest.raises(pydantic.ValidationError, match=f"{label} can not be empty!"):
            model(phone=VALID_PHONE, **{field: ""})

    @pytest.mark.parametrize(
        ("kwargs", "label"),
        [
            ({"document": "", "extension": "pdf"}, "Document"),
            ({"document": "https://x/y.pdf", "extension": ""}, "Extension"),
        ],
    )
    def test_document_fields(self, kwargs: dict[str, str], label: str) -> None:
        with pytest.raises(pydantic.ValidationError, match=f"{label} can not be empty!"):
            DocumentMessageRequest(phone=VALID_PHONE, **kwargs)

    def test_missing_payload_field(self) -> None:
        with pytest.raises(pydantic.ValidationError) as excinfo:
            ImageMessageRequest(phone=VALID_PHONE)
        assert excinfo.value.errors()[0]["loc"] == ("image",)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TextMessageRequest(phone=VALID_PHONE, message="oi", caption="x")


class TestImmutability:
    def test_frozen(self) -> None:
        request = build_request("text")
        with pytest.raises(pydantic.ValidationError):
            request.message = "outra"


class TestEnvelope:
    """MessageRequest só existe como base das variantes."""

    def test_direct_construction_rejected(self) -> None:
        with pytest.raises(TypeError, match="MessageRequest é abstrato"):
            MessageRequest(phone=VALID_PHONE)

    def test_model_construct_rejected(self) -> None:
        with pytest.raises(TypeError):
            MessageRequest.model_construct(phone=VALID_PHONE)

    def test_variants_are_envelopes(self) -> None:
        assert isinstance(build_request("text"), MessageRequest)


class TestParseMessageRequest:
    """União discriminada por kind."""

    @pytest.mark.parametrize("kind", sorted(MESSAGE_REQUEST_TYPES))
    def test_builds_variant_for_kind(self, kind: str) -> None:
        original = build_request(kind)
        data = {"kind": kind, **original.to_payload()}

        parsed = parse_message_request(data)

        assert isinstance(parsed, MESSAGE_REQUEST_TYPES[kind])
        assert parsed == original

    def test_unknown_kind(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            parse_message_request({"kind": "sticker", "phone": VALID_PHONE})

    def test_missing_kind(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            parse_message_request({"phone": VALID_PHONE, "message": "oi"})
