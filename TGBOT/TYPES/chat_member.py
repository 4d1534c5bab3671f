"""Руководство к файлу (TGBOT/TYPES/chat_member.py)
Назначение:
- Участник чата (ChatMember) как закрытое множество вариантов.
- Вариант выбирается по полю ``status`` (creator, administrator, member,
  restricted, left, kicked).
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Discriminator

from .base import TelegramObject
from .user import User


class ChatMemberOwner(TelegramObject):
    status: Literal["creator"] = "creator"
    user: User
    is_anonymous: bool = False
    custom_title: Optional[str] = None


class ChatMemberAdministrator(TelegramObject):
    status: Literal["administrator"] = "administrator"
    user: User
    can_be_edited: bool = False
    is_anonymous: bool = False
    can_manage_chat: bool = False
    can_delete_messages: bool = False
    can_manage_voice_chats: bool = False
    can_restrict_members: bool = False
    can_promote_members: bool = False
    can_change_info: bool = False
    can_invite_users: bool = False
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    custom_title: Optional[str] = None


class ChatMemberMember(TelegramObject):
    status: Literal["member"] = "member"
    user: User


class ChatMemberRestricted(TelegramObject):
    status: Literal["restricted"] = "restricted"
    user: User
    is_member: bool = False
    can_change_info: bool = False
    can_invite_users: bool = False
    can_pin_messages: bool = False
    can_send_messages: bool = False
    can_send_media_messages: bool = False
    can_send_polls: bool = False
    can_send_other_messages: bool = False
    can_add_web_page_previews: bool = False
    until_date: int = 0


class ChatMemberLeft(TelegramObject):
    status: Literal["left"] = "left"
    user: User


class ChatMemberBanned(TelegramObject):
    status: Literal["kicked"] = "kicked"
    user: User
    until_date: int = 0


ChatMember = Annotated[
    Union[
        ChatMemberOwner,
        ChatMemberAdministrator,
        ChatMemberMember,
        ChatMemberRestricted,
        ChatMemberLeft,
        ChatMemberBanned,
    ],
    Discriminator("status"),
]
