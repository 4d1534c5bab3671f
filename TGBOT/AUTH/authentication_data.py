"""Руководство к файлу (TGBOT/AUTH/authentication_data.py)
Назначение:
- Данные, подписанные платформой (Login Widget), и правила построения
  data‑check‑string для проверки их hash.
- Поля, участвующие в подписи, перечислены явно в таблице auth_fields
  каждого класса: имя атрибута, имя на проводе, политика пропуска.
- Строка: пары "<имя>=<значение>", отсортированные по имени и склеенные через "\n".
  Значение: JSON без внешних кавычек у строк.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, ClassVar, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl

import orjson
from pydantic import BaseModel, ConfigDict
from pydantic_core import to_jsonable_python


class OmitPolicy(str, Enum):
    """Когда поле пропускается в data‑check‑string."""

    NEVER = "never"
    WHEN_NULL = "when_null"
    WHEN_DEFAULT = "when_default"

    def should_omit(self, value: Any) -> bool:
        if self is OmitPolicy.NEVER:
            return False
        if value is None:
            return True
        return self is OmitPolicy.WHEN_DEFAULT and is_default_value(value)


def is_default_value(value: Any) -> bool:
    """0, 0.0, "", False и None считаются значениями по умолчанию; объекты и списки никогда."""

    if value is None:
        return True
    if isinstance(value, Enum):
        return False
    return isinstance(value, (bool, int, float, str, bytes)) and not value


def encode_field_value(value: Any, policy: OmitPolicy = OmitPolicy.WHEN_DEFAULT) -> str:
    """JSON‑представление значения; у строки снимается одна пара внешних кавычек."""

    jsonable = to_jsonable_python(value, by_alias=True, exclude_none=policy is not OmitPolicy.NEVER)
    encoded = orjson.dumps(jsonable).decode("utf-8")
    if len(encoded) >= 2 and encoded[0] == '"' and encoded[-1] == '"':
        return encoded[1:-1]
    return encoded


@dataclass(frozen=True)
class AuthField:
    """Строка таблицы подписываемых полей.

    - name: имя атрибута модели;
    - wire_name: имя в data‑check‑string (по умолчанию совпадает с name);
    - omit: политика пропуска; None: взять default_omit_policy класса;
    - accessor: как достать значение (по умолчанию getattr(data, name)).
    """

    name: str
    wire_name: Optional[str] = None
    omit: Optional[OmitPolicy] = None
    accessor: Optional[Callable[[Any], Any]] = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name

    def value_of(self, data: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(data)
        return getattr(data, self.name)


class AuthenticationData(BaseModel):
    """Базовый класс подписанных данных.

    Наследник объявляет поля модели, таблицу auth_fields и реализует
    authentication_hash / authentication_date.
    """

    auth_fields: ClassVar[Tuple[AuthField, ...]] = ()
    default_omit_policy: ClassVar[OmitPolicy] = OmitPolicy.WHEN_DEFAULT
    hash_field: ClassVar[str] = "hash"
    field_separator: ClassVar[str] = "\n"
    key_value_separator: ClassVar[str] = "="

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def authentication_hash(self) -> Optional[str]:
        raise NotImplementedError

    @property
    def authentication_date(self) -> Optional[datetime]:
        raise NotImplementedError

    def data_check_string(self, default_policy: Optional[OmitPolicy] = None) -> str:
        """Каноничная строка полей для HMAC.

        default_policy переопределяет default_omit_policy класса для полей,
        у которых собственная политика не задана.
        """

        fallback = default_policy or type(self).default_omit_policy
        rows: List[Tuple[str, str]] = []
        for auth_field in type(self).auth_fields:
            if auth_field.key == type(self).hash_field:
                continue
            value = auth_field.value_of(self)
            policy = auth_field.omit or fallback
            if policy.should_omit(value):
                continue
            rows.append((auth_field.key, encode_field_value(value, policy)))
        rows.sort(key=lambda row: row[0])
        return type(self).field_separator.join(
            f"{key}{type(self).key_value_separator}{value}" for key, value in rows
        )


class UserAuthenticationData(AuthenticationData):
    """Данные пользователя от Telegram Login Widget.

    См. https://core.telegram.org/widgets/login: виджет передаёт id,
    first_name, last_name, username, photo_url, auth_date и hash.
    """

    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    photo_url: Optional[str] = None
    auth_date: Optional[int] = None
    hash: Optional[str] = None

    auth_fields: ClassVar[Tuple[AuthField, ...]] = (
        AuthField("auth_date"),
        AuthField("first_name"),
        AuthField("id"),
        AuthField("last_name"),
        AuthField("photo_url"),
        AuthField("username"),
    )

    @property
    def authentication_hash(self) -> Optional[str]:
        return self.hash

    @property
    def authentication_date(self) -> Optional[datetime]:
        if self.auth_date is None:
            return None
        return datetime.fromtimestamp(self.auth_date, tz=timezone.utc)

    @classmethod
    def from_query(cls, query: Union[str, Mapping[str, Any]]) -> "UserAuthenticationData":
        """Разобрать параметры редиректа виджета (строку query или словарь)."""

        if isinstance(query, str):
            # parse_qsl сам делает URL‑декодирование
            params = dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))
        else:
            params = dict(query)
        return cls.model_validate(params)
