"""Руководство к файлу (TGBOT/TYPES/commands.py)
Назначение:
- Команды бота (BotCommand) и области их действия (BotCommandScope).
- BotCommandScope: закрытое множество вариантов с дискриминатором ``type``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Discriminator

from .base import TelegramObject


class BotCommand(TelegramObject):
    command: str
    description: str


class BotCommandScopeDefault(TelegramObject):
    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramObject):
    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramObject):
    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramObject):
    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramObject):
    type: Literal["chat"] = "chat"
    chat_id: Union[int, str]


class BotCommandScopeChatAdministrators(TelegramObject):
    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: Union[int, str]


class BotCommandScopeChatMember(TelegramObject):
    type: Literal["chat_member"] = "chat_member"
    chat_id: Union[int, str]
    user_id: int


BotCommandScope = Annotated[
    Union[
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    ],
    Discriminator("type"),
]
