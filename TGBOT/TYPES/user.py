"""Руководство к файлу (TGBOT/TYPES/user.py)
Назначение:
- Пользователь или бот Telegram (User), результат getMe.
"""

from __future__ import annotations

from typing import Optional

from .base import TelegramObject


class User(TelegramObject):
    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name
