"""Руководство к файлу (TGBOT/errors.py)
Назначение:
- Иерархия исключений клиента Telegram Bot API.
- Все ошибки библиотеки наследуются от TelegramBotError, чтобы вызывающий код
  мог перехватить их одним except.
- Сетевые ошибки httpx и asyncio.CancelledError сюда не заворачиваются.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .CLIENT.response import FailureResponse, ResponseParameters


class TelegramBotError(Exception):
    """Базовое исключение библиотеки."""


class InvalidArgumentError(TelegramBotError, ValueError):
    """Некорректный (пустой) аргумент публичного метода."""


class ConfigurationError(TelegramBotError):
    """Неверная конфигурация бота или InputFile с нулём/несколькими вариантами."""


class MalformedResponseError(TelegramBotError):
    """Тело ответа нельзя разобрать в конверт {ok, result | error}."""


class AuthenticationError(TelegramBotError):
    """Подпись данных виджета не совпала или данные устарели."""


class TelegramRequestError(TelegramBotError):
    """Запрос к Bot API завершился неуспешно.

    Возникает при HTTP‑статусе не 2xx или при ``ok=false`` в конверте.
    Поля:
    - method_name: имя вызванного метода API;
    - response: разобранный конверт ошибки (None, если тело не разобралось).

    Повторы и backoff остаются на стороне вызывающего кода, для этого
    наружу выставлены error_code и parameters.retry_after.
    """

    def __init__(
        self,
        method_name: str,
        response: Optional["FailureResponse"],
        message: str = "Request of method was not successful.",
    ) -> None:
        super().__init__(message)
        self.method_name = method_name
        self.response = response

    @property
    def error_code(self) -> Optional[int]:
        return self.response.error_code if self.response is not None else None

    @property
    def description(self) -> Optional[str]:
        return self.response.description if self.response is not None else None

    @property
    def parameters(self) -> Optional["ResponseParameters"]:
        return self.response.parameters if self.response is not None else None

    @property
    def retry_after(self) -> Optional[int]:
        params = self.parameters
        return params.retry_after if params is not None else None

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        params = self.parameters
        return params.migrate_to_chat_id if params is not None else None

    def __str__(self) -> str:
        base = super().__str__()
        if self.response is None:
            return f"{base} (method={self.method_name})"
        return f"{base} (method={self.method_name}, error_code={self.error_code}, description={self.description!r})"
