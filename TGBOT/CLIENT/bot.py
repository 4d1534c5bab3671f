"""Руководство к файлу (TGBOT/CLIENT/bot.py)
Назначение:
- Async‑клиент Telegram Bot API (TelegramBot).
- send(method): сборка тела (body.py) → POST {api}/bot{token}/{method} →
  разбор конверта (response.py) → result или TelegramRequestError.
- Одна попытка на вызов: повторы, backoff по retry_after и таймауты
  остаются на стороне вызывающего кода.
- Дополнительно: скачивание файлов и проверка данных Login Widget токеном бота.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, List, Optional, Union

import httpx

from ..AUTH.authentication_data import AuthenticationData
from ..AUTH.verifier import AuthenticationVerifier
from ..config import DEFAULT_API_URL, BotSettings, load_settings
from ..errors import InvalidArgumentError, MalformedResponseError, TelegramRequestError
from ..METHODS.common import GetMe
from ..METHODS.media import GetFile
from ..METHODS.messages import ChatId, SendMessage
from ..METHODS.updates import GetUpdates
from ..REQUESTS.method import Method
from ..TYPES.media import File
from ..TYPES.message import Message
from ..TYPES.update import Update
from ..TYPES.user import User
from .body import build_request_body
from .response import FailureResponse, decode_response


logger = logging.getLogger(__name__)


class TelegramBot:
    """Клиент Bot API поверх httpx.AsyncClient.

    Если client не передан, бот создаёт собственный пул соединений и
    закрывает его в aclose(); переданный извне клиент не закрывается.
    Один экземпляр можно использовать из нескольких задач одновременно.
    """

    API_VERSION = "5.4"

    def __init__(self, settings: BotSettings, client: Optional[httpx.AsyncClient] = None) -> None:
        if settings is None:
            raise InvalidArgumentError("settings must not be None")
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=settings.request_timeout)
        self._verifier = AuthenticationVerifier(settings.token)
        logger.info("%s created with Telegram Bot API %s", type(self).__name__, self.API_VERSION)

    @classmethod
    def create(
        cls,
        token: str,
        api: str = DEFAULT_API_URL,
        client: Optional[httpx.AsyncClient] = None,
        **overrides: Any,
    ) -> "TelegramBot":
        """Создать бота по токену; неверные значения дают ConfigurationError."""

        return cls(load_settings(token=token, api=api, **overrides), client=client)

    @property
    def settings(self) -> BotSettings:
        return self._settings

    async def __aenter__(self) -> "TelegramBot":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # --------------------------- Запросы ---------------------------

    async def send(self, method: Method) -> Any:
        """Выполнить запрос и вернуть ``result`` из ответа.

        Ошибки:
        - InvalidArgumentError: method не задан;
        - ConfigurationError: InputFile с нулём/несколькими вариантами;
        - TelegramRequestError: HTTP не 2xx, ``ok=false`` или тело не разобралось;
        - httpx.TransportError и asyncio.CancelledError пробрасываются как есть.
        """

        if method is None:
            raise InvalidArgumentError("method must not be None")
        if not method.name:
            raise InvalidArgumentError(f"{type(method).__name__} has no method name")

        body = build_request_body(method)
        logger.info("Sending request: %s (%s)", method.name, body.content_type)

        http_response = await self._client.post(self._settings.base_url + method.name, **body.httpx_kwargs())
        logger.info("Response received: %s, %s", method.name, http_response.status_code)

        # Тело читаем при любом статусе: описание ошибки приходит и с 4xx/5xx.
        status_error: Optional[httpx.HTTPStatusError] = None
        try:
            http_response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_error = exc

        try:
            envelope = decode_response(http_response.content, type(method).result_type)
        except MalformedResponseError as exc:
            logger.error("Request failed: %s, malformed response (status %s)", method.name, http_response.status_code)
            raise TelegramRequestError(method.name, None) from (status_error or exc)

        if isinstance(envelope, FailureResponse):
            logger.error("Request failed: %s, %s", method.name, envelope.description)
            raise TelegramRequestError(method.name, envelope) from status_error
        if status_error is not None:
            logger.error("Request failed: %s, status %s", method.name, http_response.status_code)
            raise TelegramRequestError(method.name, None) from status_error

        return envelope.result

    async def get_me(self) -> User:
        return await self.send(GetMe())

    async def get_updates(self, **params: Any) -> List[Update]:
        return await self.send(GetUpdates(**params))

    async def send_message(self, chat_id: ChatId, text: str, **params: Any) -> Message:
        return await self.send(SendMessage(chat_id=chat_id, text=text, **params))

    async def get_file(self, file: Union[str, Any]) -> File:
        """getFile по file_id или по объекту с атрибутом file_id."""

        file_id = file if isinstance(file, str) else getattr(file, "file_id", None)
        if not file_id:
            raise InvalidArgumentError("file id must not be empty")
        return await self.send(GetFile(file_id=file_id))

    async def download_file(self, file: Union[File, str, Any]) -> bytes:
        """Скачать содержимое файла.

        Принимает File (результат getFile) или то, что понимает get_file();
        во втором случае сначала выполняется getFile.
        """

        if file is None:
            raise InvalidArgumentError("file must not be None")
        if not isinstance(file, File):
            file = await self.get_file(file)
        if not file.file_path:
            raise InvalidArgumentError("file has no file_path, request it with getFile first")

        response = await self._client.get(self._settings.file_url(file.file_path))
        response.raise_for_status()
        return response.content

    # --------------------------- Login Widget ---------------------------

    def compute_hash(self, data: AuthenticationData) -> str:
        return self._verifier.compute_hash(data)

    def validate(
        self,
        data: AuthenticationData,
        max_age: Optional[timedelta] = None,
        raise_on_failure: bool = True,
    ) -> bool:
        return self._verifier.validate(data, max_age=max_age, raise_on_failure=raise_on_failure)
