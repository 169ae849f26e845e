"""Validators: validação de parâmetros antes de qualquer IO.

Estrutura:
- sms/: limites e formatos da Twilio (números E.164-like, texto até 1600)
"""

__all__: list[str] = []
