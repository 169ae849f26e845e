"""Limites e formatos aceitos pela API de SMS da Twilio."""

from __future__ import annotations

import re

MAX_PHONE_NUMBER_LENGTH = 16
MAX_BODY_LENGTH = 1600

# Formato E.164-like: "+" opcional seguido apenas de dígitos
PHONE_NUMBER_PATTERN = re.compile(r"^\+?[0-9]+$")
