"""Руководство к пакету (TGBOT/AUTH)
Назначение:
- Проверка подписанных данных Login Widget: таблица подписываемых полей
  (authentication_data.py) и вычисление/сверка HMAC (verifier.py).
"""

from .authentication_data import (
    AuthenticationData,
    AuthField,
    OmitPolicy,
    UserAuthenticationData,
    encode_field_value,
    is_default_value,
)
from .verifier import AuthenticationVerifier

__all__ = [
    "AuthenticationData",
    "AuthField",
    "OmitPolicy",
    "UserAuthenticationData",
    "encode_field_value",
    "is_default_value",
    "AuthenticationVerifier",
]
