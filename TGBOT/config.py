"""Руководство к файлу (TGBOT/config.py)
Назначение:
- Хранит и валидирует настройки доступа к Telegram Bot API.
- Считывает адрес API и токен бота из переменных окружения TGBOT_* (или .env).
- Используется TelegramBot (CLIENT/bot.py) и AuthenticationVerifier (AUTH/verifier.py).
"""

from __future__ import annotations

import re
from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


DEFAULT_API_URL = "https://api.telegram.org"

# Формат токена: "<bot id>:<secret>", без "/": токен встраивается в путь URL.
TOKEN_PATTERN = re.compile(r"^\d+:[^\s/]+$")


class BotSettings(BaseSettings):
    """Настройки бота.

    Поля:
    - api: базовый URL Bot API (по умолчанию https://api.telegram.org).
    - token: токен бота вида ``123456:ABC...``.
    - request_timeout: таймаут HTTP в секундах; None: без таймаута библиотеки.
    - debug: флаг детализированного логирования.
    """

    api: str = Field(default=DEFAULT_API_URL, description="Базовый URL Bot API")
    token: str = Field(..., description="Токен бота", repr=False)
    request_timeout: Optional[float] = Field(default=None, description="Таймаут HTTP, сек")
    debug: bool = Field(default=False, description="Debug-логирование")

    model_config = SettingsConfigDict(env_prefix="TGBOT_", env_file=".env", extra="ignore")

    @field_validator("api")
    @classmethod
    def _check_api(cls, value: str) -> str:
        parts = urlsplit(value or "")
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError("api must be an absolute http(s) URL")
        return value

    @field_validator("token")
    @classmethod
    def _check_token(cls, value: str) -> str:
        if not TOKEN_PATTERN.match(value or ""):
            raise ValueError(
                "Token was not valid. See https://core.telegram.org/bots/api#authorizing-your-bot "
                "for more information."
            )
        return value

    @property
    def base_url(self) -> str:
        """URL, к которому дописывается имя метода: ``{api}/bot{token}/``."""

        return f"{self.api.rstrip('/')}/bot{self.token}/"

    def file_url(self, file_path: str) -> str:
        """URL для скачивания файла по ``File.file_path``."""

        return f"{self.api.rstrip('/')}/file/bot{self.token}/{file_path.lstrip('/')}"


def load_settings(**overrides: Any) -> BotSettings:
    """Считывает настройки из окружения TGBOT_* с учётом явных переопределений.

    Переменные окружения:
    - TGBOT_API: базовый URL Bot API.
    - TGBOT_TOKEN: токен бота (обязателен).
    - TGBOT_REQUEST_TIMEOUT: таймаут HTTP в секундах.
    - TGBOT_DEBUG: включает debug‑режим.

    Ошибки валидации pydantic превращаются в ConfigurationError.
    """

    try:
        return BotSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid bot configuration: {exc}") from exc
