"""Руководство к файлу (TGBOT/REQUESTS/input_file.py)
Назначение:
- Ссылка на файл для отправки в Bot API (InputFile).
- Ровно один из трёх вариантов: file_id на серверах Telegram, HTTP(S) URL
  или локальный поток для загрузки через multipart/form-data.
- Поток несёт уникальный токен; в параметрах запроса он упоминается как
  ``attach://<token>``, а сама часть multipart называется ``<token>``.
"""

from __future__ import annotations

import mimetypes
import os
import uuid
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Optional, Union

from pydantic_core import core_schema

from ..errors import ConfigurationError


ATTACH_PREFIX = "attach://"
DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(name: Optional[str]) -> str:
    """Тип содержимого по расширению имени файла (application/octet-stream, если неизвестен)."""

    if not name:
        return DEFAULT_MIME_TYPE
    mime, _ = mimetypes.guess_type(name)
    return mime or DEFAULT_MIME_TYPE


@dataclass
class FileStream:
    """Локальный файл для загрузки.

    Токен генерируется при создании объекта (uuid4) и никогда не переиспользуется.
    """

    name: Optional[str]
    stream: Optional[BinaryIO]
    mime_type: Optional[str] = None
    token: uuid.UUID = field(default_factory=uuid.uuid4, init=False)

    @property
    def attach_value(self) -> str:
        return f"{ATTACH_PREFIX}{self.token}"

    @property
    def part_name(self) -> str:
        """Имя части multipart, с которым сопоставляется attach://."""

        return str(self.token)

    @property
    def content_type(self) -> str:
        return self.mime_type or guess_mime_type(self.name)

    @property
    def is_valid(self) -> bool:
        return self.stream is not None and bool(self.name)


@dataclass
class InputFile:
    """Файл для отправки: file_id, url или поток (FileStream).

    Создавайте через именованные конструкторы from_file_id / from_url /
    from_path / from_stream. Инвариант «ровно один вариант» проверяется
    ensure_single_variant() непосредственно перед сериализацией.
    """

    file_id: Optional[str] = None
    url: Optional[str] = None
    file: Optional[FileStream] = None

    # --------------------------- Конструкторы ---------------------------

    @classmethod
    def from_file_id(cls, file_id: Union[str, Any]) -> "InputFile":
        """Повторная отправка уже загруженного файла.

        Принимает строку или любой объект с атрибутом ``file_id``
        (PhotoSize, Document, File и т.п.).
        """

        if not isinstance(file_id, str):
            file_id = getattr(file_id, "file_id", None)
        return cls(file_id=file_id)

    @classmethod
    def from_url(cls, url: Union[str, Any]) -> "InputFile":
        return cls(url=str(url) if url is not None else None)

    @classmethod
    def from_stream(cls, stream: BinaryIO, name: str, mime_type: Optional[str] = None) -> "InputFile":
        return cls(file=FileStream(name=name, stream=stream, mime_type=mime_type))

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "InputFile":
        """Открывает локальный файл на чтение; поток закрывает вызывающий код."""

        name = os.path.basename(os.fspath(path))
        return cls(file=FileStream(name=name, stream=open(path, "rb"), mime_type=guess_mime_type(name)))

    # --------------------------- Варианты ---------------------------

    @property
    def is_uploadable(self) -> bool:
        """True, если задан поток с непустым именем."""

        return self.file is not None and self.file.is_valid

    def ensure_single_variant(self) -> None:
        """Бросает ConfigurationError, если задано ноль или несколько вариантов."""

        populated = (
            (1 if self.is_uploadable else 0)
            + (0 if self.url is None else 1)
            + (0 if self.file_id is None else 1)
        )
        if populated != 1:
            raise ConfigurationError("The input file contains no or more than one properties.")

    def canonical_form(self) -> str:
        """Строка для подстановки в параметр запроса: file_id, url или attach://token."""

        self.ensure_single_variant()
        if self.file_id is not None:
            return self.file_id
        if self.url is not None:
            return self.url
        assert self.file is not None
        return self.file.attach_value

    # --------------------------- pydantic ---------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        # В моделях запросов InputFile хранится как есть, а в JSON пишется canonical_form().
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.canonical_form(),
                when_used="json",
            ),
        )
