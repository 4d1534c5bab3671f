"""Руководство к файлу (TGBOT/TYPES/message.py)
Назначение:
- Сообщение (Message) и связанные объекты: MessageEntity, MessageId.
- Покрыто подмножество полей, нужное методам из TGBOT/METHODS.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import TelegramObject
from .chat import Chat
from .keyboard import InlineKeyboardMarkup
from .media import Document, PhotoSize
from .user import User


class MessageEntity(TelegramObject):
    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


class MessageId(TelegramObject):
    """Результат copyMessage."""

    message_id: int


class Message(TelegramObject):
    message_id: int
    # "from" является ключевым словом Python.
    from_user: Optional[User] = Field(default=None, alias="from")
    sender_chat: Optional[Chat] = None
    date: int
    chat: Chat
    forward_from: Optional[User] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional["Message"] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    photo: Optional[List[PhotoSize]] = None
    document: Optional[Document] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
