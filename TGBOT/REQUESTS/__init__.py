"""Руководство к пакету (TGBOT/REQUESTS)
Назначение:
- Модель типизированного запроса (method.py) и ссылка на файл (input_file.py).
"""

from .input_file import ATTACH_PREFIX, FileStream, InputFile, guess_mime_type
from .method import Method, UploadMethod

__all__ = [
    "ATTACH_PREFIX",
    "FileStream",
    "InputFile",
    "guess_mime_type",
    "Method",
    "UploadMethod",
]
