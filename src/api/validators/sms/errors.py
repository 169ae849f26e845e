"""Erros e resultado discriminado da validação de SMS."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.protocols.validator import ValidationError


class IssueKind(str, Enum):
    """Tipo de violação encontrada."""

    MISSING = "missing"
    INVALID = "invalid"


class MissingArgumentError(ValidationError):
    """Parâmetro obrigatório não informado (None)."""

    kind = IssueKind.MISSING.value


class InvalidArgumentError(ValidationError):
    """Parâmetro informado mas vazio, longo demais ou mal formatado."""

    kind = IssueKind.INVALID.value


@dataclass(frozen=True)
class ValidationIssue:
    """Primeira violação encontrada (kind + field + message)."""

    kind: IssueKind
    field: str
    message: str

    def to_exception(self) -> ValidationError:
        if self.kind is IssueKind.MISSING:
            return MissingArgumentError(self.message, self.field)
        return InvalidArgumentError(self.message, self.field)
