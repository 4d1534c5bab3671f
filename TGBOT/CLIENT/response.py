"""Руководство к файлу (TGBOT/CLIENT/response.py)
Назначение:
- Конверт ответа Bot API: {"ok": true, "result": ...} или
  {"ok": false, "error_code": ..., "description": ..., "parameters": {...}}.
- decode_response() разбирает сырое тело в SuccessResponse[T] или FailureResponse
  по полю ok; T задаётся типом результата метода (скаляр, объект, список).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Generic, Literal, Optional, TypeVar, Union

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import MalformedResponseError


T = TypeVar("T")


class ResponseParameters(BaseModel):
    """Доп. сведения об ошибке, помогающие обработать её автоматически."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


class SuccessResponse(BaseModel, Generic[T]):
    ok: Literal[True] = True
    result: T
    description: Optional[str] = None


class FailureResponse(BaseModel):
    ok: Literal[False] = False
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional[ResponseParameters] = None


Response = Union[SuccessResponse[Any], FailureResponse]


# Кэш по типу результата: типы результатов методов хешируемы.
@lru_cache(maxsize=None)
def _success_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(SuccessResponse[result_type])


def decode_response(raw: bytes, result_type: Any = Any) -> Response:
    """Разобрать тело ответа.

    Бросает MalformedResponseError, если тело не JSON‑объект, нет булева
    поля ``ok`` или содержимое не соответствует схеме результата.
    """

    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise MalformedResponseError("Response body is not valid JSON") from exc

    if not isinstance(data, dict) or not isinstance(data.get("ok"), bool):
        raise MalformedResponseError("Response body has no boolean 'ok' field")

    try:
        if data["ok"]:
            if "result" not in data:
                raise MalformedResponseError("Successful response has no 'result' field")
            return _success_adapter(result_type).validate_python(data)
        return FailureResponse.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError(f"Response does not match the expected schema: {exc}") from exc


def encode_response(response: Response) -> bytes:
    """Обратная операция к decode_response (используется тестами и заглушками API)."""

    return orjson.dumps(response.model_dump(mode="json", by_alias=True, exclude_none=True))
