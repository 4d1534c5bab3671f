"""Руководство к файлу (TGBOT/AUTH/verifier.py)
Назначение:
- Проверка подписи данных Telegram Login Widget.
- Алгоритм:
  1. secret_key = SHA256(BotToken);
  2. hash = HMAC_SHA256(secret_key, data_check_string), hex;
  3. сравнение с присланным hash без учёта регистра;
  4. опционально: проверка свежести auth_date.
- Не делает I/O и не хранит состояния между вызовами.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ..errors import AuthenticationError, InvalidArgumentError
from .authentication_data import AuthenticationData


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthenticationVerifier:
    """Вычисляет и проверяет hash подписанных данных по токену бота.

    clock: источник текущего времени (aware datetime), подменяется в тестах.
    """

    def __init__(self, token: str, clock: Optional[Callable[[], datetime]] = None) -> None:
        if not token:
            raise InvalidArgumentError("token must be a non-empty string")
        self._secret_key = hashlib.sha256(token.encode("utf-8")).digest()
        self._clock = clock or _utcnow

    def compute_hash_for(self, data_check_string: str) -> str:
        """HMAC‑SHA256 строки в верхнем регистре hex (64 символа)."""

        return hmac.new(
            key=self._secret_key,
            msg=data_check_string.encode("utf-8"),
            digestmod=hashlib.sha256,
        ).hexdigest().upper()

    def compute_hash(self, data: AuthenticationData) -> str:
        if data is None:
            raise InvalidArgumentError("authentication data must not be None")
        return self.compute_hash_for(data.data_check_string())

    def validate(
        self,
        data: AuthenticationData,
        max_age: Optional[timedelta] = None,
        raise_on_failure: bool = True,
    ) -> bool:
        """Проверить подпись и (если задан max_age) свежесть данных.

        При неуспехе бросает AuthenticationError или, при
        raise_on_failure=False, возвращает False.
        """

        expected = self.compute_hash(data)
        received = data.authentication_hash or ""

        # Защищённое сравнение без учёта регистра hex.
        valid = hmac.compare_digest(expected.lower().encode("utf-8"), received.lower().encode("utf-8"))

        if valid and max_age is not None:
            issued = data.authentication_date
            valid = issued is not None and self._clock() - issued <= max_age

        if not valid:
            logger.warning("Invalid authorization data (%s)", type(data).__name__)
            if raise_on_failure:
                raise AuthenticationError("Invalid authorization.")
            return False

        logger.debug("Valid authorization data (%s)", type(data).__name__)
        return True
