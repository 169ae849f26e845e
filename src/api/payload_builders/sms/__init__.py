"""Payload builders para SMS (Twilio Messages API)."""

from api.payload_builders.sms.twilio import (
    DEFAULT_MESSAGES_URL_TEMPLATE,
    FORM_CONTENT_TYPE,
    build_form_fields,
    build_messages_url,
    encode_form,
)

__all__ = [
    "DEFAULT_MESSAGES_URL_TEMPLATE",
    "FORM_CONTENT_TYPE",
    "build_form_fields",
    "build_messages_url",
    "encode_form",
]
