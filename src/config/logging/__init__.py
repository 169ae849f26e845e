"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Credenciais (auth_token, authorization) nunca são emitidas.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SensitiveDataFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveDataFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
