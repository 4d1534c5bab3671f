"""Руководство к файлу (TGBOT/TYPES/input_media.py)
Назначение:
- Элементы альбома/замены медиа (InputMedia*), вариант выбирается по ``type``.
- Поля media/thumb: InputFile: при загрузке потоком в JSON попадает
  ``attach://<token>``, а сами байты уходят отдельной частью multipart.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import ConfigDict, Discriminator

from ..REQUESTS.input_file import InputFile
from .base import TelegramObject
from .enums import ParseMode
from .message import MessageEntity


class _InputMediaBase(TelegramObject):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    media: InputFile
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None

    def input_files(self) -> List[InputFile]:
        files = [self.media]
        thumb = getattr(self, "thumb", None)
        if thumb is not None:
            files.append(thumb)
        return files


class InputMediaPhoto(_InputMediaBase):
    type: Literal["photo"] = "photo"


class InputMediaVideo(_InputMediaBase):
    type: Literal["video"] = "video"
    thumb: Optional[InputFile] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(_InputMediaBase):
    type: Literal["animation"] = "animation"
    thumb: Optional[InputFile] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(_InputMediaBase):
    type: Literal["audio"] = "audio"
    thumb: Optional[InputFile] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(_InputMediaBase):
    type: Literal["document"] = "document"
    thumb: Optional[InputFile] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = Annotated[
    Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument],
    Discriminator("type"),
]
