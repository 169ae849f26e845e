"""Agregador de settings do twilio-sms-notifier.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.sms import (
    TWILIO_API_BASE_URL,
    TWILIO_API_VERSION,
    SmsSettings,
    get_sms_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "TWILIO_API_BASE_URL",
    "TWILIO_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    "get_base_settings",
    # SMS
    "SmsSettings",
    "get_sms_settings",
]
