"""Руководство к пакету (TGBOT/TYPES)
Назначение:
- Подмножество объектов Bot API, которые возвращают и принимают методы из
  TGBOT/METHODS. Полиморфные семейства (ChatMember, BotCommandScope,
  InputMedia): размеченные объединения pydantic.
"""

from .base import TelegramObject
from .chat import Chat, ChatPhoto
from .chat_member import (
    ChatMember,
    ChatMemberAdministrator,
    ChatMemberBanned,
    ChatMemberLeft,
    ChatMemberMember,
    ChatMemberOwner,
    ChatMemberRestricted,
)
from .commands import (
    BotCommand,
    BotCommandScope,
    BotCommandScopeAllChatAdministrators,
    BotCommandScopeAllGroupChats,
    BotCommandScopeAllPrivateChats,
    BotCommandScopeChat,
    BotCommandScopeChatAdministrators,
    BotCommandScopeChatMember,
    BotCommandScopeDefault,
)
from .enums import ChatAction, ChatType, ParseMode
from .input_media import (
    InputMedia,
    InputMediaAnimation,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
)
from .keyboard import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
)
from .media import Document, File, PhotoSize
from .message import Message, MessageEntity, MessageId
from .update import Update, WebhookInfo
from .user import User

__all__ = [
    "TelegramObject",
    "Chat",
    "ChatPhoto",
    "ChatMember",
    "ChatMemberAdministrator",
    "ChatMemberBanned",
    "ChatMemberLeft",
    "ChatMemberMember",
    "ChatMemberOwner",
    "ChatMemberRestricted",
    "BotCommand",
    "BotCommandScope",
    "BotCommandScopeAllChatAdministrators",
    "BotCommandScopeAllGroupChats",
    "BotCommandScopeAllPrivateChats",
    "BotCommandScopeChat",
    "BotCommandScopeChatAdministrators",
    "BotCommandScopeChatMember",
    "BotCommandScopeDefault",
    "ChatAction",
    "ChatType",
    "ParseMode",
    "InputMedia",
    "InputMediaAnimation",
    "InputMediaAudio",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMediaVideo",
    "ForceReply",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "KeyboardButton",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "Document",
    "File",
    "PhotoSize",
    "Message",
    "MessageEntity",
    "MessageId",
    "Update",
    "WebhookInfo",
    "User",
]
