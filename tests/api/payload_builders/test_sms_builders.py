"""Testes para api.payload_builders.sms (URL e corpo form-urlencoded)."""

from __future__ import annotations

from urllib.parse import parse_qsl

from api.payload_builders.sms import (
    DEFAULT_MESSAGES_URL_TEMPLATE,
    FORM_CONTENT_TYPE,
    build_form_fields,
    build_messages_url,
    encode_form,
)
from app.protocols.models import SmsMessageRequest


def _request(body: str = "hello") -> SmsMessageRequest:
    return SmsMessageRequest(
        account_sid="AC1",
        auth_token="tok",
        from_number="+15005550006",
        to_number="+15005550007",
        body=body,
    )


class TestMessagesUrl:
    def test_default_endpoint(self) -> None:
        assert (
            build_messages_url("AC1")
            == "https://api.twilio.com/2010-04-01/Accounts/AC1/Messages.json"
        )

    def test_default_template_has_placeholder(self) -> None:
        assert DEFAULT_MESSAGES_URL_TEMPLATE == (
            "https://api.twilio.com/2010-04-01/Accounts/{account_sid}/Messages.json"
        )

    def test_custom_template(self) -> None:
        template = "http://localhost:8080/v9/Accounts/{account_sid}/Messages.json"
        assert build_messages_url("ACx", template) == (
            "http://localhost:8080/v9/Accounts/ACx/Messages.json"
        )

    def test_account_sid_is_quoted_as_single_segment(self) -> None:
        url = build_messages_url("AC/1 ?")
        assert url == "https://api.twilio.com/2010-04-01/Accounts/AC%2F1%20%3F/Messages.json"


class TestFormPayload:
    def test_fields_in_fixed_order(self) -> None:
        assert build_form_fields(_request()) == [
            ("From", "+15005550006"),
            ("To", "+15005550007"),
            ("Body", "hello"),
        ]

    def test_encoded_form(self) -> None:
        assert encode_form(build_form_fields(_request())) == (
            "From=%2B15005550006&To=%2B15005550007&Body=hello"
        )

    def test_encoding_roundtrips_special_characters(self) -> None:
        body = "Olá & até já = 100% ✓"
        encoded = encode_form(build_form_fields(_request(body)))
        assert parse_qsl(encoded) == [
            ("From", "+15005550006"),
            ("To", "+15005550007"),
            ("Body", body),
        ]

    def test_content_type(self) -> None:
        assert FORM_CONTENT_TYPE == "application/x-www-form-urlencoded"
