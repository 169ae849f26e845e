"""Use cases específicos de SMS."""

from .send_sms import SmsSender

__all__ = [
    "SmsSender",
]
