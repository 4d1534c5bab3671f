"""Руководство к файлу (TGBOT/METHODS/messages.py)
Назначение:
- Отправка и управление текстовыми сообщениями.
"""

from __future__ import annotations

from typing import List, Optional, Union

from ..REQUESTS.method import Method
from ..TYPES.enums import ChatAction, ParseMode
from ..TYPES.keyboard import ReplyMarkup
from ..TYPES.message import Message, MessageEntity, MessageId


ChatId = Union[int, str]


class SendMessage(Method):
    method_name = "sendMessage"
    result_type = Message

    chat_id: ChatId
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class ForwardMessage(Method):
    method_name = "forwardMessage"
    result_type = Message

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None


class CopyMessage(Method):
    method_name = "copyMessage"
    result_type = MessageId

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class DeleteMessage(Method):
    method_name = "deleteMessage"
    result_type = bool

    chat_id: ChatId
    message_id: int


class SendChatAction(Method):
    method_name = "sendChatAction"
    result_type = bool

    chat_id: ChatId
    action: ChatAction
