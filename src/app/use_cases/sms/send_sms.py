"""Use case de envio de SMS via Twilio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.twilio import TwilioMessagesClient
from api.validators.sms import SmsRequestValidator
from app.protocols.models import SmsMessageRequest, SmsSendResult

if TYPE_CHECKING:
    from app.protocols.http_client import HttpTransportProtocol
    from app.protocols.outbound_sender import SmsDispatcherProtocol
    from app.protocols.validator import SmsRequestValidatorProtocol

logger = logging.getLogger(__name__)


class SmsSender:
    """Orquestra validação e envio de um SMS.

    A validação roda antes de qualquer IO e suas exceções propagam para o
    chamador. Tudo que acontece depois do despacho vira booleano (send) ou
    SmsSendResult (send_with_result).

    Não guarda estado entre chamadas: pode ser compartilhado por chamadas
    concorrentes desde que o transporte também possa.
    """

    def __init__(
        self,
        transport: HttpTransportProtocol,
        validator: SmsRequestValidatorProtocol | None = None,
        messages_url_template: str | None = None,
        log: logging.Logger | None = None,
        dispatcher: SmsDispatcherProtocol | None = None,
    ) -> None:
        """Inicializa o sender.

        Args:
            transport: Transporte HTTP reutilizado entre chamadas
            validator: Validador de parâmetros. Usa SmsRequestValidator se None.
            messages_url_template: Template da URL com {account_sid}
            log: Logger para os eventos de envio
            dispatcher: Substitui o TwilioMessagesClient padrão
        """
        self._validator = validator or SmsRequestValidator()
        self._dispatcher = dispatcher or TwilioMessagesClient(
            transport,
            messages_url_template=messages_url_template,
            log=log or logger,
        )

    async def send(
        self,
        account_sid: str | None,
        auth_token: str | None,
        from_number: str | None,
        to_number: str | None,
        body: str | None,
    ) -> bool:
        """Envia o SMS e retorna True se a Twilio aceitou (2xx).

        Raises:
            MissingArgumentError: Parâmetro obrigatório ausente
            InvalidArgumentError: Parâmetro vazio, longo demais ou mal formatado
        """
        result = await self.send_with_result(
            account_sid, auth_token, from_number, to_number, body
        )
        return result.success

    async def send_with_result(
        self,
        account_sid: str | None,
        auth_token: str | None,
        from_number: str | None,
        to_number: str | None,
        body: str | None,
    ) -> SmsSendResult:
        """Como send(), mas retorna status e motivo da falha."""
        request = SmsMessageRequest(
            account_sid=account_sid,
            auth_token=auth_token,
            from_number=from_number,
            to_number=to_number,
            body=body,
        )
        self._validator.validate_sms_request(request)
        return await self._dispatcher.dispatch(request)
