"""Руководство к файлу (TGBOT/REQUESTS/method.py)
Назначение:
- Базовая модель запроса к Bot API (Method).
- Имя метода и тип результата объявляются на уровне класса, параметры
  задаются обычными полями pydantic, имя поля на проводе берётся из alias.
- Набор полей фиксируется при объявлении класса, parameters() лишь обходит
  эту таблицу и отбрасывает None.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .input_file import InputFile


class Method(BaseModel):
    """Запрос к методу Bot API.

    Атрибуты класса:
    - method_name: имя метода API (``getMe``, ``sendPhoto`` ...), непустое.
    - result_type: тип поля ``result`` в успешном ответе.
    """

    method_name: ClassVar[str] = ""
    result_type: ClassVar[Any] = Any

    model_config = ConfigDict(populate_by_name=True, frozen=True, arbitrary_types_allowed=True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Абстрактные промежуточные классы (UploadMethod) имени не задают.
        if cls.__dict__.get("method_name") == "":
            raise TypeError(f"{cls.__name__}.method_name must not be empty")

    @property
    def name(self) -> str:
        return type(self).method_name

    def parameters(self) -> List[Tuple[str, Any]]:
        """Пары (имя на проводе, значение) для всех заданных (не None) полей."""

        items: List[Tuple[str, Any]] = []
        for field_name, info in type(self).model_fields.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            items.append((info.alias or field_name, value))
        return items

    def input_files(self) -> List[InputFile]:
        """Файлы, которые метод может загрузить через multipart (по умолчанию нет)."""

        return []

    def has_files(self) -> bool:
        return any(f is not None and f.is_uploadable for f in self.input_files())


class UploadMethod(Method):
    """Запрос, параметры которого могут содержать загружаемые файлы.

    Наследники перечисляют свои InputFile в _files(); None допускается.
    """

    def _files(self) -> Iterable[Optional[InputFile]]:
        return ()

    def input_files(self) -> List[InputFile]:
        return [f for f in self._files() if f is not None]
