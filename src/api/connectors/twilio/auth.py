"""Autenticação HTTP Basic da API Twilio."""

from __future__ import annotations

import base64


def build_basic_auth_header(account_sid: str, auth_token: str) -> str:
    """Monta o valor do header Authorization.

    Credencial "account_sid:auth_token" em base64, prefixada por "Basic ".
    Ex.: ("AC1", "tok") -> "Basic QUMxOnRvaw==".
    """
    credentials = f"{account_sid}:{auth_token}".encode()
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"
