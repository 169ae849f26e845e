"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada infra (httpx).
"""

from __future__ import annotations

from typing import Protocol


class HttpResponseProtocol(Protocol):
    """Contrato mínimo de uma resposta HTTP (httpx.Response satisfaz)."""

    @property
    def status_code(self) -> int: ...

    @property
    def text(self) -> str: ...


class HttpTransportProtocol(Protocol):
    """Contrato mínimo para transporte HTTP de formulários.

    Deve levantar exceção em falha de transporte (rede, DNS, timeout).
    Pooling, TLS e timeouts são responsabilidade da implementação.
    """

    async def post_form(
        self,
        url: str,
        content: str,
        headers: dict[str, str],
    ) -> HttpResponseProtocol: ...
