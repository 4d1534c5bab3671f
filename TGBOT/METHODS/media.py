"""Руководство к файлу (TGBOT/METHODS/media.py)
Назначение:
- Отправка файлов (фото, документы, альбомы) и получение ссылки на файл (getFile).
- Каждый метод перечисляет свои InputFile в _files(); потоки из этого списка
  уходят отдельными частями multipart.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..REQUESTS.input_file import InputFile
from ..REQUESTS.method import Method, UploadMethod
from ..TYPES.enums import ParseMode
from ..TYPES.input_media import InputMedia
from ..TYPES.keyboard import ReplyMarkup
from ..TYPES.media import File
from ..TYPES.message import Message, MessageEntity
from .messages import ChatId


class _SendMedia(UploadMethod):
    chat_id: ChatId
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPhoto(_SendMedia):
    method_name = "sendPhoto"
    result_type = Message

    photo: InputFile

    def _files(self) -> Iterable[Optional[InputFile]]:
        return (self.photo,)


class SendDocument(_SendMedia):
    method_name = "sendDocument"
    result_type = Message

    document: InputFile
    thumb: Optional[InputFile] = None
    disable_content_type_detection: Optional[bool] = None

    def _files(self) -> Iterable[Optional[InputFile]]:
        return (self.document, self.thumb)


class SendMediaGroup(UploadMethod):
    """Альбом из 2–10 элементов; файлы берутся из media[*].media и media[*].thumb."""

    method_name = "sendMediaGroup"
    result_type = List[Message]

    chat_id: ChatId
    media: List[InputMedia]
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None

    def _files(self) -> Iterable[Optional[InputFile]]:
        for item in self.media:
            yield from item.input_files()


class GetFile(Method):
    method_name = "getFile"
    result_type = File

    file_id: str
