"""Руководство к файлу (TGBOT/METHODS/updates.py)
Назначение:
- Получение обновлений (getUpdates) и настройка webhook.
- setWebhook умеет загружать самоподписанный сертификат (certificate).
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..REQUESTS.input_file import InputFile
from ..REQUESTS.method import Method, UploadMethod
from ..TYPES.update import Update, WebhookInfo


class GetUpdates(Method):
    method_name = "getUpdates"
    result_type = List[Update]

    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


class SetWebhook(UploadMethod):
    method_name = "setWebhook"
    result_type = bool

    url: str
    certificate: Optional[InputFile] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None

    def _files(self) -> Iterable[Optional[InputFile]]:
        return (self.certificate,)


class DeleteWebhook(Method):
    method_name = "deleteWebhook"
    result_type = bool

    drop_pending_updates: Optional[bool] = None


class GetWebhookInfo(Method):
    method_name = "getWebhookInfo"
    result_type = WebhookInfo
