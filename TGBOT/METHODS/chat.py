"""Руководство к файлу (TGBOT/METHODS/chat.py)
Назначение:
- Информация о чате и его участниках, смена фото чата.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..REQUESTS.input_file import InputFile
from ..REQUESTS.method import Method, UploadMethod
from ..TYPES.chat import Chat
from ..TYPES.chat_member import ChatMember
from .messages import ChatId


class GetChat(Method):
    method_name = "getChat"
    result_type = Chat

    chat_id: ChatId


class GetChatMember(Method):
    method_name = "getChatMember"
    result_type = ChatMember

    chat_id: ChatId
    user_id: int


class GetChatAdministrators(Method):
    method_name = "getChatAdministrators"
    result_type = List[ChatMember]

    chat_id: ChatId


class SetChatPhoto(UploadMethod):
    """Фото чата можно только загрузить, file_id и URL API не принимает."""

    method_name = "setChatPhoto"
    result_type = bool

    chat_id: ChatId
    photo: InputFile

    def _files(self) -> Iterable[Optional[InputFile]]:
        return (self.photo,)
