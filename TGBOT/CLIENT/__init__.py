"""Руководство к пакету (TGBOT/CLIENT)
Назначение:
- bot: диспетчер запросов TelegramBot;
- body: сборка тела запроса (JSON или multipart/form-data);
- response: конверт ответа и его разбор.
"""

from .body import JSON_CONTENT_TYPE, MULTIPART_CONTENT_TYPE, RequestBody, build_request_body, encode_json
from .bot import TelegramBot
from .response import (
    FailureResponse,
    Response,
    ResponseParameters,
    SuccessResponse,
    decode_response,
    encode_response,
)

__all__ = [
    "JSON_CONTENT_TYPE",
    "MULTIPART_CONTENT_TYPE",
    "RequestBody",
    "build_request_body",
    "encode_json",
    "TelegramBot",
    "FailureResponse",
    "Response",
    "ResponseParameters",
    "SuccessResponse",
    "decode_response",
    "encode_response",
]
