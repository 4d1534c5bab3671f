"""Руководство к файлу (TGBOT/METHODS/common.py)
Назначение:
- Служебные методы без параметров: getMe, logOut, close.
"""

from __future__ import annotations

from ..REQUESTS.method import Method
from ..TYPES.user import User


class GetMe(Method):
    """Проверка токена: возвращает информацию о самом боте."""

    method_name = "getMe"
    result_type = User


class LogOut(Method):
    method_name = "logOut"
    result_type = bool


class Close(Method):
    method_name = "close"
    result_type = bool
