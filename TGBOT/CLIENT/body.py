"""Руководство к файлу (TGBOT/CLIENT/body.py)
Назначение:
- Собирает тело HTTP‑запроса из Method.
- Без загружаемых файлов: один JSON‑документ (application/json).
- С файлами multipart/form-data: по части на каждый поток (имя части
  равно токену файла) плюс по части на каждый заданный параметр.
  Строка, InputFile и URL идут текстом, остальное отдельным JSON.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import orjson
from pydantic import AnyUrl
from pydantic_core import to_jsonable_python

from ..REQUESTS.input_file import InputFile
from ..REQUESTS.method import Method


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

# (имя части, (имя файла | None, содержимое, content-type | None)): формат files= в httpx.
Part = Tuple[str, Tuple[Optional[str], Any, Optional[str]]]


@dataclass
class RequestBody:
    """Готовое тело запроса."""

    content_type: str
    content: Optional[bytes] = None
    parts: List[Part] = field(default_factory=list)

    @property
    def is_multipart(self) -> bool:
        return self.content_type == MULTIPART_CONTENT_TYPE

    def httpx_kwargs(self) -> Dict[str, Any]:
        """Аргументы для httpx.AsyncClient.post."""

        if self.is_multipart:
            return {"files": self.parts}
        return {"content": self.content, "headers": {"Content-Type": JSON_CONTENT_TYPE}}


def encode_json(value: Any) -> bytes:
    """JSON без None‑полей; InputFile пишется в каноничной форме, enum: значением."""

    return orjson.dumps(to_jsonable_python(value, by_alias=True, exclude_none=True))


def _validate_files(method: Method) -> None:
    for input_file in method.input_files():
        input_file.ensure_single_variant()
    for _, value in method.parameters():
        if isinstance(value, InputFile):
            value.ensure_single_variant()


def _parameter_part(name: str, value: Any) -> Part:
    if isinstance(value, str):
        return name, (None, value, None)
    if isinstance(value, InputFile):
        return name, (None, value.canonical_form(), None)
    if isinstance(value, AnyUrl):
        return name, (None, str(value), None)
    return name, (None, encode_json(value), JSON_CONTENT_TYPE)


def build_request_body(method: Method) -> RequestBody:
    """Кодирует запрос в JSON или multipart/form-data.

    Перед кодированием каждый InputFile проверяется на единственность
    варианта; ConfigurationError пробрасывается как есть.
    """

    _validate_files(method)

    if not method.has_files():
        payload = method.model_dump(mode="json", by_alias=True, exclude_none=True)
        return RequestBody(content_type=JSON_CONTENT_TYPE, content=orjson.dumps(payload))

    parts: List[Part] = []
    seen = set()
    for input_file in method.input_files():
        if not input_file.is_uploadable:
            continue
        stream = input_file.file
        assert stream is not None
        if stream.token in seen:
            continue
        seen.add(stream.token)
        parts.append((stream.part_name, (stream.name, stream.stream, stream.content_type)))

    uploads = len(parts)
    for name, value in method.parameters():
        parts.append(_parameter_part(name, value))

    logger.debug("multipart body for %s: %d file part(s), %d field part(s)", method.name, uploads, len(parts) - uploads)
    return RequestBody(content_type=MULTIPART_CONTENT_TYPE, parts=parts)
