# Руководство к файлу (TESTS/unit/test_request_body_unit.py)
# Назначение:
# - Unit-тесты CLIENT/body.py: выбор JSON или multipart/form-data,
#   имена частей для потоков и attach://, кодирование параметров.

from __future__ import annotations

import io

import orjson
import pytest

from TGBOT.CLIENT.body import (
    JSON_CONTENT_TYPE,
    MULTIPART_CONTENT_TYPE,
    build_request_body,
)
from TGBOT.errors import ConfigurationError
from TGBOT.METHODS.common import GetMe
from TGBOT.METHODS.media import SendDocument, SendMediaGroup, SendPhoto
from TGBOT.METHODS.messages import SendMessage
from TGBOT.REQUESTS.input_file import InputFile
from TGBOT.TYPES.enums import ParseMode
from TGBOT.TYPES.input_media import InputMediaDocument, InputMediaPhoto
from TGBOT.TYPES.keyboard import InlineKeyboardButton, InlineKeyboardMarkup


def parts_by_name(body):
    return {name: value for name, value in body.parts}


def test_method_without_parameters_is_empty_json_object():
    body = build_request_body(GetMe())

    assert body.content_type == JSON_CONTENT_TYPE
    assert orjson.loads(body.content) == {}
    assert body.httpx_kwargs()["headers"] == {"Content-Type": "application/json"}


def test_json_body_omits_unset_fields_and_uses_enum_values():
    markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Go", callback_data="go")]])
    method = SendMessage(chat_id=1, text="hi", parse_mode=ParseMode.HTML, reply_markup=markup)

    body = build_request_body(method)

    assert not body.is_multipart
    assert orjson.loads(body.content) == {
        "chat_id": 1,
        "text": "hi",
        "parse_mode": "HTML",
        "reply_markup": {"inline_keyboard": [[{"text": "Go", "callback_data": "go"}]]},
    }


def test_file_id_and_url_stay_in_json():
    body = build_request_body(SendPhoto(chat_id="@chan", photo=InputFile.from_file_id("AgAD")))
    assert orjson.loads(body.content) == {"chat_id": "@chan", "photo": "AgAD"}

    body = build_request_body(SendPhoto(chat_id=5, photo=InputFile.from_url("https://example.com/p.png")))
    assert orjson.loads(body.content)["photo"] == "https://example.com/p.png"


def test_stream_switches_to_multipart():
    photo = InputFile.from_stream(io.BytesIO(b"\x89PNG"), "p.png")
    method = SendPhoto(chat_id=42, photo=photo, caption="nice", disable_notification=True)

    body = build_request_body(method)

    assert body.is_multipart
    assert body.content_type == MULTIPART_CONTENT_TYPE
    token = str(photo.file.token)
    parts = parts_by_name(body)

    # Часть с байтами названа токеном, параметр ссылается на неё через attach://.
    assert parts[token] == ("p.png", photo.file.stream, "image/png")
    assert parts["photo"] == (None, f"attach://{token}", None)
    assert parts["caption"] == (None, "nice", None)
    # Не строковые значения уходят JSON-частями.
    assert parts["chat_id"] == (None, b"42", "application/json")
    assert parts["disable_notification"] == (None, b"true", "application/json")
    assert body.parts[0][0] == token
    assert body.httpx_kwargs() == {"files": body.parts}


def test_multipart_omits_unset_parameters():
    body = build_request_body(SendPhoto(chat_id=1, photo=InputFile.from_stream(io.BytesIO(b"x"), "x.jpg")))

    names = [name for name, _ in body.parts]
    assert "caption" not in names
    assert "reply_markup" not in names


def test_document_with_thumb_has_two_file_parts():
    document = InputFile.from_stream(io.BytesIO(b"doc"), "doc.txt")
    thumb = InputFile.from_stream(io.BytesIO(b"jpg"), "thumb.jpg")

    body = build_request_body(SendDocument(chat_id=1, document=document, thumb=thumb))

    parts = parts_by_name(body)
    assert str(document.file.token) in parts
    assert str(thumb.file.token) in parts
    assert parts["thumb"] == (None, f"attach://{thumb.file.token}", None)


def test_media_group_references_streams_inside_json_part():
    first = InputFile.from_stream(io.BytesIO(b"1"), "1.jpg")
    second = InputFile.from_file_id("AgAD")
    method = SendMediaGroup(
        chat_id=1,
        media=[InputMediaPhoto(media=first, caption="one"), InputMediaDocument(media=second)],
    )

    body = build_request_body(method)

    parts = parts_by_name(body)
    assert str(first.file.token) in parts
    filename, content, content_type = parts["media"]
    assert filename is None
    assert content_type == "application/json"
    assert orjson.loads(content) == [
        {"type": "photo", "media": f"attach://{first.file.token}", "caption": "one"},
        {"type": "document", "media": "AgAD"},
    ]


def test_media_group_without_streams_is_json():
    method = SendMediaGroup(
        chat_id=1,
        media=[InputMediaPhoto(media=InputFile.from_file_id("A")), InputMediaPhoto(media=InputFile.from_file_id("B"))],
    )

    body = build_request_body(method)

    assert orjson.loads(body.content)["media"] == [
        {"type": "photo", "media": "A"},
        {"type": "photo", "media": "B"},
    ]


def test_same_stream_is_uploaded_once():
    shared = InputFile.from_stream(io.BytesIO(b"1"), "1.jpg")
    method = SendMediaGroup(chat_id=1, media=[InputMediaPhoto(media=shared), InputMediaPhoto(media=shared)])

    body = build_request_body(method)

    assert [name for name, _ in body.parts].count(str(shared.file.token)) == 1


@pytest.mark.parametrize(
    "photo",
    [
        InputFile(),
        InputFile(file_id="AgAD", url="https://example.com/p.png"),
    ],
)
def test_invalid_input_file_raises_configuration_error(photo):
    with pytest.raises(ConfigurationError):
        build_request_body(SendPhoto(chat_id=1, photo=photo))


def test_invalid_media_item_raises_configuration_error():
    method = SendMediaGroup(chat_id=1, media=[InputMediaPhoto(media=InputFile())])

    with pytest.raises(ConfigurationError):
        build_request_body(method)
