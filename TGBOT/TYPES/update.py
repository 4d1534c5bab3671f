"""Руководство к файлу (TGBOT/TYPES/update.py)
Назначение:
- Входящее обновление (Update) для getUpdates и сведения о webhook (WebhookInfo).
- Сам приём webhook‑запросов библиотека не реализует.
"""

from __future__ import annotations

from typing import List, Optional

from .base import TelegramObject
from .message import Message


class Update(TelegramObject):
    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None

    @property
    def effective_message(self) -> Optional[Message]:
        return self.message or self.edited_message or self.channel_post or self.edited_channel_post


class WebhookInfo(TelegramObject):
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
