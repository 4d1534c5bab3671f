"""Руководство к файлу (TGBOT/logging_config.py)
Назначение:
- Конфигурирует стандартное логирование для клиента Bot API.
- Модули библиотеки пишут в собственные логгеры (logging.getLogger(__name__)),
  здесь только настройка корневого логгера для приложений и тестов.
"""

from __future__ import annotations

import logging


def setup_logging(debug: bool = False) -> None:
    """Инициализирует базовое логирование.

    Параметры:
    - debug: если True, уровень логирования DEBUG, иначе INFO.
    """

    level = logging.DEBUG if debug else logging.INFO

    # httpx пишет URL запроса в INFO, а в URL лежит токен бота.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Если логирование уже настроено, не переопределяем формат хендлеров.
    if logging.getLogger().handlers:
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
