"""Руководство к файлу (TGBOT/TYPES/base.py)
Назначение:
- Базовый класс для объектов Bot API (TelegramObject).
- Неизвестные поля игнорируются: API расширяется без смены версии клиента.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TelegramObject(BaseModel):
    """Объект Bot API: поля в snake_case, как на проводе."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
