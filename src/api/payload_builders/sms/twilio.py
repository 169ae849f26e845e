"""Builders do request de envio de SMS para a API Twilio."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from config.settings.sms import SmsSettings

if TYPE_CHECKING:
    from app.protocols.models import SmsMessageRequest

# https://api.twilio.com/2010-04-01/Accounts/{account_sid}/Messages.json
DEFAULT_MESSAGES_URL_TEMPLATE = SmsSettings().messages_url_template

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_messages_url(
    account_sid: str,
    url_template: str | None = None,
) -> str:
    """Substitui o account_sid no segmento de path do endpoint Messages.

    Args:
        account_sid: Account SID (já validado)
        url_template: Template com {account_sid}. Usa o endpoint público se None.

    Returns:
        URL no formato https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json
    """
    template = url_template or DEFAULT_MESSAGES_URL_TEMPLATE
    return template.format(account_sid=quote(account_sid, safe=""))


def build_form_fields(request: SmsMessageRequest) -> list[tuple[str, str]]:
    """Campos do formulário, exatamente nesta ordem: From, To, Body."""
    return [
        ("From", request.from_number or ""),
        ("To", request.to_number or ""),
        ("Body", request.body or ""),
    ]


def encode_form(fields: list[tuple[str, str]]) -> str:
    """Codifica campos como application/x-www-form-urlencoded."""
    return urlencode(fields)
