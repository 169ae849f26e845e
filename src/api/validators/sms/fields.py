"""Checagens por campo.

Cada função retorna a primeira violação do campo ou None.
"""

from __future__ import annotations

from api.validators.sms.errors import IssueKind, ValidationIssue
from api.validators.sms.limits import (
    MAX_BODY_LENGTH,
    MAX_PHONE_NUMBER_LENGTH,
    PHONE_NUMBER_PATTERN,
)


def _missing(field: str, label: str) -> ValidationIssue:
    return ValidationIssue(IssueKind.MISSING, field, f"{field}: {label} is required")


def _invalid(field: str, message: str) -> ValidationIssue:
    return ValidationIssue(IssueKind.INVALID, field, f"{field}: {message}")


def _is_blank(value: str) -> bool:
    return not value.strip()


def check_required_text(value: str | None, field: str, label: str) -> ValidationIssue | None:
    """Campo obrigatório: None é ausência, vazio/espaços é inválido."""
    if value is None:
        return _missing(field, label)
    if _is_blank(value):
        return _invalid(field, f"{label} cannot be empty")
    return None


def check_phone_number(value: str | None, field: str, label: str) -> ValidationIssue | None:
    """Valida número de telefone (tamanho e formato E.164-like).

    Args:
        value: Número informado
        field: Nome do parâmetro (para a mensagem de erro)
        label: Descrição legível do campo

    Returns:
        ValidationIssue da primeira violação, ou None se válido
    """
    issue = check_required_text(value, field, label)
    if issue or value is None:
        return issue

    if len(value) > MAX_PHONE_NUMBER_LENGTH:
        return _invalid(
            field,
            f"{label} is too long, max length is {MAX_PHONE_NUMBER_LENGTH}",
        )

    if not PHONE_NUMBER_PATTERN.fullmatch(value):
        return _invalid(
            field,
            f"{label} contains invalid characters, "
            "only digits and a leading '+' are allowed (E.164)",
        )
    return None


def check_message_body(value: str | None, field: str = "body") -> ValidationIssue | None:
    """Valida o texto da mensagem (não vazio, até MAX_BODY_LENGTH)."""
    issue = check_required_text(value, field, "message text")
    if issue or value is None:
        return issue

    if len(value) > MAX_BODY_LENGTH:
        return _invalid(
            field,
            f"message text exceeds the limit of {MAX_BODY_LENGTH} characters",
        )
    return None
