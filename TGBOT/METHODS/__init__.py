"""Руководство к пакету (TGBOT/METHODS)
Назначение:
- Типизированные запросы Bot API (подмножество каталога).
- Каждый класс: Method с именем метода и типом результата; отправляется
  через TelegramBot.send().
"""

from .chat import GetChat, GetChatAdministrators, GetChatMember, SetChatPhoto
from .commands import DeleteMyCommands, GetMyCommands, SetMyCommands
from .common import Close, GetMe, LogOut
from .media import GetFile, SendDocument, SendMediaGroup, SendPhoto
from .messages import ChatId, CopyMessage, DeleteMessage, ForwardMessage, SendChatAction, SendMessage
from .updates import DeleteWebhook, GetUpdates, GetWebhookInfo, SetWebhook

__all__ = [
    "GetChat",
    "GetChatAdministrators",
    "GetChatMember",
    "SetChatPhoto",
    "DeleteMyCommands",
    "GetMyCommands",
    "SetMyCommands",
    "Close",
    "GetMe",
    "LogOut",
    "GetFile",
    "SendDocument",
    "SendMediaGroup",
    "SendPhoto",
    "ChatId",
    "CopyMessage",
    "DeleteMessage",
    "ForwardMessage",
    "SendChatAction",
    "SendMessage",
    "DeleteWebhook",
    "GetUpdates",
    "GetWebhookInfo",
    "SetWebhook",
]
