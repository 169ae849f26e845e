"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SmsMessageRequest, SmsSendResult


class SmsSenderProtocol(Protocol):
    """Contrato público de envio de SMS (resultado booleano)."""

    async def send(
        self,
        account_sid: str | None,
        auth_token: str | None,
        from_number: str | None,
        to_number: str | None,
        body: str | None,
    ) -> bool: ...


class SmsDispatcherProtocol(Protocol):
    """Contrato mínimo para despachar uma requisição já validada."""

    async def dispatch(self, request: SmsMessageRequest) -> SmsSendResult: ...
