"""Руководство к пакету (TGBOT)
Назначение:
- Типизированный async‑клиент Telegram Bot API.
- Публичный вход: TelegramBot (CLIENT/bot.py), методы из METHODS, объекты
  из TYPES, InputFile для отправки файлов и проверка Login Widget (AUTH).
"""

from __future__ import annotations

from .AUTH import AuthenticationVerifier, AuthField, OmitPolicy, UserAuthenticationData
from .CLIENT import TelegramBot
from .config import BotSettings, load_settings
from .errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidArgumentError,
    MalformedResponseError,
    TelegramBotError,
    TelegramRequestError,
)
from .logging_config import setup_logging
from .REQUESTS import InputFile, Method

__all__ = [
    "AuthenticationVerifier",
    "AuthField",
    "OmitPolicy",
    "UserAuthenticationData",
    "TelegramBot",
    "BotSettings",
    "load_settings",
    "AuthenticationError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "TelegramBotError",
    "TelegramRequestError",
    "setup_logging",
    "InputFile",
    "Method",
]
