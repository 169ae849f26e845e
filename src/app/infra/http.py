"""Cliente HTTP base (httpx) para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import TracebackType

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Mantém um único httpx.AsyncClient reutilizado entre chamadas; pooling
    de conexões fica a cargo do httpx. Sem retry.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
            )
        return self._client

    async def post_form(
        self,
        url: str,
        content: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia POST com corpo já codificado.

        Raises:
            HttpError: Em timeout ou falha de conexão/transporte
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            return await self._get_client().post(
                url,
                content=content,
                headers=merged_headers,
            )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.ConnectError as exc:
            raise HttpError("http_connection_error") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_request_error") from exc

    async def aclose(self) -> None:
        """Fecha o httpx.AsyncClient subjacente, se criado."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("http_client_closed")

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
