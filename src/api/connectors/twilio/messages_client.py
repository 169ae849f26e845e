"""Cliente da Messages API da Twilio.

Único ponto de IO do canal SMS:
- Monta URL, headers (Basic Auth) e corpo form-urlencoded
- Envia via transporte injetado (HttpTransportProtocol)
- Converte o desfecho em SmsSendResult, sem propagar exceções

Sem retry e sem parsing do JSON de resposta: qualquer 2xx é sucesso.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.twilio.auth import build_basic_auth_header
from api.connectors.twilio.twilio_logging import (
    log_remote_rejection,
    log_success,
    log_transport_failure,
)
from api.payload_builders.sms import (
    FORM_CONTENT_TYPE,
    build_form_fields,
    build_messages_url,
    encode_form,
)
from app.protocols.models import SmsMessageRequest, SmsSendResult

if TYPE_CHECKING:
    from app.protocols.http_client import HttpResponseProtocol, HttpTransportProtocol

logger = logging.getLogger(__name__)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class TwilioMessagesClient:
    """Envia uma requisição de SMS já validada para a Twilio."""

    def __init__(
        self,
        transport: HttpTransportProtocol,
        messages_url_template: str | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._url_template = messages_url_template
        self._logger = log or logger

    def build_request(self, request: SmsMessageRequest) -> tuple[str, dict[str, str], str]:
        """Monta (url, headers, corpo) do POST.

        Args:
            request: Requisição validada (credenciais e números presentes)

        Returns:
            Tupla (url, headers, form_body)
        """
        account_sid = request.account_sid or ""
        url = build_messages_url(account_sid, self._url_template)
        headers = {
            "Authorization": build_basic_auth_header(account_sid, request.auth_token or ""),
            "Content-Type": FORM_CONTENT_TYPE,
            "Accept": "application/json",
        }
        return url, headers, encode_form(build_form_fields(request))

    async def dispatch(self, request: SmsMessageRequest) -> SmsSendResult:
        """Executa o POST e interpreta a resposta."""
        url, headers, content = self.build_request(request)
        try:
            response = await self._transport.post_form(url, content, headers)
            # Leitura do corpo também pode falhar (conexão cai no meio)
            return self._process_response(response, request, url)
        except Exception as exc:
            log_transport_failure(exc, url, self._logger)
            return SmsSendResult.transport_failure(f"{type(exc).__name__}: {exc}")

    def _process_response(
        self,
        response: HttpResponseProtocol,
        request: SmsMessageRequest,
        endpoint: str,
    ) -> SmsSendResult:
        status_code = response.status_code
        if not _is_success(status_code):
            error_body = response.text
            log_remote_rejection(status_code, error_body, endpoint, self._logger)
            return SmsSendResult.rejected(status_code, error_body)

        log_success(request.to_number or "", status_code, self._logger)
        return SmsSendResult.sent(status_code)
