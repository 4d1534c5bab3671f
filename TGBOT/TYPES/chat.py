"""Руководство к файлу (TGBOT/TYPES/chat.py)
Назначение:
- Чат (Chat) и его фото (ChatPhoto).
"""

from __future__ import annotations

from typing import Optional

from .base import TelegramObject
from .enums import ChatType


class ChatPhoto(TelegramObject):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class Chat(TelegramObject):
    id: int
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    linked_chat_id: Optional[int] = None
