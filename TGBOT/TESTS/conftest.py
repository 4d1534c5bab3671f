# Руководство к файлу (TESTS/conftest.py)
# Назначение:
# - Общие фикстуры для pytest-тестов клиента Bot API.
# - HTTP подменяется httpx.MockTransport: сеть в тестах не используется.

from __future__ import annotations

import email.policy
from email.parser import BytesParser
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio

from TGBOT.CLIENT.bot import TelegramBot
from TGBOT.config import BotSettings


TEST_TOKEN = "123:abc"
TEST_API = "http://localhost/"


@pytest.fixture
def settings() -> BotSettings:
    """Настройки с тестовым токеном и локальным API."""

    return BotSettings(token=TEST_TOKEN, api=TEST_API)


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Запросы, дошедшие до подменённого транспорта (по порядку)."""

    return []


@pytest_asyncio.fixture
async def make_bot(settings: BotSettings, sent_requests: List[httpx.Request]):
    """Фабрика ботов поверх MockTransport с заданным обработчиком.

    Обработчик получает httpx.Request и возвращает httpx.Response; каждый
    запрос дополнительно складывается в sent_requests.
    """

    clients: List[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> TelegramBot:
        async def recording_handler(request: httpx.Request) -> httpx.Response:
            await request.aread()
            sent_requests.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        clients.append(client)
        return TelegramBot(settings, client=client)

    yield factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def parse_multipart() -> Callable[[httpx.Request], List[dict]]:
    """Разбор тела multipart/form-data в список частей.

    Каждая часть: {"name", "filename", "content_type", "body"}.
    """

    def parse(request: httpx.Request) -> List[dict]:
        content_type = request.headers["Content-Type"]
        raw = b"Content-Type: " + content_type.encode("latin-1") + b"\r\n\r\n" + request.content
        message = BytesParser(policy=email.policy.HTTP).parsebytes(raw)
        parts: List[dict] = []
        for part in message.iter_parts():
            parts.append(
                {
                    "name": part.get_param("name", header="content-disposition"),
                    "filename": part.get_filename(),
                    "content_type": part.get("Content-Type"),
                    "body": part.get_payload(decode=True),
                }
            )
        return parts

    return parse
