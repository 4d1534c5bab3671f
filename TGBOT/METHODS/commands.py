"""Руководство к файлу (TGBOT/METHODS/commands.py)
Назначение:
- Управление списком команд бота с учётом области (scope) и языка.
"""

from __future__ import annotations

from typing import List, Optional

from ..REQUESTS.method import Method
from ..TYPES.commands import BotCommand, BotCommandScope


class SetMyCommands(Method):
    method_name = "setMyCommands"
    result_type = bool

    commands: List[BotCommand]
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class GetMyCommands(Method):
    method_name = "getMyCommands"
    result_type = List[BotCommand]

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class DeleteMyCommands(Method):
    method_name = "deleteMyCommands"
    result_type = bool

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None
