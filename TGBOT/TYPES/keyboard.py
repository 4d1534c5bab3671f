"""Руководство к файлу (TGBOT/TYPES/keyboard.py)
Назначение:
- Разметка клавиатур для отправляемых сообщений (reply_markup).
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from .base import TelegramObject


class InlineKeyboardButton(TelegramObject):
    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None


class InlineKeyboardMarkup(TelegramObject):
    inline_keyboard: List[List[InlineKeyboardButton]]


class KeyboardButton(TelegramObject):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None


class ReplyKeyboardMarkup(TelegramObject):
    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramObject):
    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None


class ForceReply(TelegramObject):
    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]
