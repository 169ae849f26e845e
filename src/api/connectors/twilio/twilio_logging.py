"""Helpers de logging para a API Twilio.

Nenhum helper recebe o auth_token: credenciais nunca chegam aos logs.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_remote_rejection(
    status_code: int,
    error_body: str,
    endpoint: str,
    log: logging.Logger | None = None,
) -> None:
    """Loga resposta não-2xx com status e corpo retornado pela Twilio."""
    (log or logger).error(
        "Erro da API Twilio (%s): %s",
        status_code,
        error_body,
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "status_code": status_code,
            "error_body": error_body,
        },
    )


def log_transport_failure(
    exc: BaseException,
    endpoint: str,
    log: logging.Logger | None = None,
) -> None:
    """Loga falha de comunicação com traceback. Deve ser chamado dentro do except."""
    (log or logger).exception(
        "Exceção na comunicação com a API Twilio",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "error_type": type(exc).__name__,
        },
    )


def log_success(
    to_number: str,
    status_code: int,
    log: logging.Logger | None = None,
) -> None:
    """Loga envio aceito pela Twilio."""
    (log or logger).info(
        "SMS enviado com sucesso para %s",
        to_number,
        extra={"to_number": to_number, "status_code": status_code},
    )
