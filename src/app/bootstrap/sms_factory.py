"""Factories do canal SMS: transporte httpx e SmsSender.

Conecta SmsSettings às implementações concretas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig
from app.observability import correlation_scope
from app.use_cases.sms import SmsSender
from config.settings import get_sms_settings

if TYPE_CHECKING:
    from app.protocols.http_client import HttpTransportProtocol
    from config.settings import SmsSettings

USER_AGENT = "twilio-sms-notifier/0.1.0"

logger = logging.getLogger(__name__)


def create_http_client(settings: SmsSettings | None = None) -> HttpClient:
    """Cria o transporte HTTP com timeout e TLS configurados.

    Args:
        settings: SmsSettings opcional. Se None, carrega do ambiente.
    """
    sms = settings or get_sms_settings()
    config = HttpClientConfig(
        timeout_seconds=sms.request_timeout_seconds,
        default_headers={"User-Agent": USER_AGENT},
        verify_ssl=sms.verify_ssl,
    )
    return HttpClient(config=config)


def create_sms_sender(
    settings: SmsSettings | None = None,
    transport: HttpTransportProtocol | None = None,
) -> SmsSender:
    """Cria SmsSender com endpoint e transporte configurados.

    Args:
        settings: SmsSettings opcional. Se None, carrega do ambiente.
        transport: Transporte a reutilizar. Se None, cria um HttpClient.

    Returns:
        SmsSender pronto para uso.
    """
    sms = settings or get_sms_settings()
    sender = SmsSender(
        transport or create_http_client(sms),
        messages_url_template=sms.messages_url_template,
    )
    logger.debug(
        "sms_sender_created",
        extra={"api_base_url": sms.api_base_url, "api_version": sms.api_version},
    )
    return sender


async def send_sms_with_settings(
    to_number: str | None,
    body: str | None,
    *,
    sender: SmsSender | None = None,
    settings: SmsSettings | None = None,
) -> bool:
    """Envia SMS usando conta e número de origem configurados.

    Raises:
        MissingArgumentError: Se to_number/body ausentes
        InvalidArgumentError: Se credenciais configuradas vazias ou
            parâmetros inválidos
    """
    sms = settings or get_sms_settings()
    with correlation_scope():
        if sender is not None:
            return await sender.send(
                sms.account_sid, sms.auth_token, sms.from_number, to_number, body
            )

        async with create_http_client(sms) as transport:
            own_sender = create_sms_sender(sms, transport)
            return await own_sender.send(
                sms.account_sid, sms.auth_token, sms.from_number, to_number, body
            )
