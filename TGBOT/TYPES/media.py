"""Руководство к файлу (TGBOT/TYPES/media.py)
Назначение:
- Описания файлов на серверах Telegram: PhotoSize, Document, File.
- File.file_path используется TelegramBot.download_file().
"""

from __future__ import annotations

from typing import Optional

from .base import TelegramObject


class PhotoSize(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Document(TelegramObject):
    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class File(TelegramObject):
    """Файл, готовый к скачиванию (результат getFile).

    Ссылка действительна не меньше часа; file_path может отсутствовать.
    """

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None
