# Руководство к файлу (TESTS/unit/test_response_unit.py)
# Назначение:
# - Unit-тесты CLIENT/response.py: разбор конверта {ok, result | error},
#   типизированный result, ошибки разбора.

from __future__ import annotations

from typing import Any, List

import orjson
import pytest

from TGBOT.CLIENT.response import (
    FailureResponse,
    ResponseParameters,
    SuccessResponse,
    decode_response,
    encode_response,
)
from TGBOT.errors import MalformedResponseError
from TGBOT.TYPES.chat_member import ChatMember, ChatMemberAdministrator, ChatMemberBanned
from TGBOT.TYPES.message import Message
from TGBOT.TYPES.user import User


def test_decode_primitive_result():
    envelope = decode_response(b'{"ok":true,"result":true}', bool)

    assert isinstance(envelope, SuccessResponse)
    assert envelope.ok is True
    assert envelope.result is True


def test_decode_object_result():
    raw = b'{"ok":true,"result":{"id":42,"is_bot":true,"first_name":"Bot","username":"test_bot"}}'

    envelope = decode_response(raw, User)

    assert envelope.result == User(id=42, is_bot=True, first_name="Bot", username="test_bot")


def test_decode_list_result_with_tagged_union():
    raw = orjson.dumps(
        {
            "ok": True,
            "result": [
                {"status": "administrator", "user": {"id": 1, "first_name": "A"}, "can_delete_messages": True},
                {"status": "kicked", "user": {"id": 2, "first_name": "B"}, "until_date": 0},
            ],
        }
    )

    envelope = decode_response(raw, List[ChatMember])

    first, second = envelope.result
    assert isinstance(first, ChatMemberAdministrator)
    assert first.can_delete_messages is True
    assert isinstance(second, ChatMemberBanned)
    assert second.user.first_name == "B"


def test_decode_message_with_from_alias():
    raw = orjson.dumps(
        {
            "ok": True,
            "result": {
                "message_id": 5,
                "date": 1000,
                "chat": {"id": 1, "type": "private"},
                "from": {"id": 7, "first_name": "Ann"},
                "text": "hi",
            },
        }
    )

    message = decode_response(raw, Message).result

    assert message.from_user.first_name == "Ann"
    assert message.text == "hi"


def test_unknown_fields_are_ignored():
    envelope = decode_response(b'{"ok":true,"result":{"id":1,"first_name":"A","new_field":1},"extra":2}', User)

    assert envelope.result.id == 1


def test_decode_failure_with_parameters():
    raw = b'{"ok":false,"error_code":429,"description":"Too Many Requests","parameters":{"retry_after":3}}'

    envelope = decode_response(raw, bool)

    assert isinstance(envelope, FailureResponse)
    assert envelope.error_code == 429
    assert envelope.description == "Too Many Requests"
    assert envelope.parameters == ResponseParameters(retry_after=3)


def test_failure_without_optional_fields():
    envelope = decode_response(b'{"ok":false}')

    assert isinstance(envelope, FailureResponse)
    assert envelope.error_code is None
    assert envelope.parameters is None


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b"[1, 2]",
        b'{"result": 1}',
        b'{"ok": "yes", "result": 1}',
        b'{"ok": true}',
    ],
)
def test_malformed_bodies(raw):
    with pytest.raises(MalformedResponseError):
        decode_response(raw, Any)


def test_result_not_matching_schema_is_malformed():
    with pytest.raises(MalformedResponseError):
        decode_response(b'{"ok":true,"result":{"first_name":"no id"}}', User)


def test_encode_then_decode_preserves_result():
    for result_type, value in ((int, 42), (User, User(id=1, first_name="A")), (List[int], [1, 2, 3])):
        original = SuccessResponse[result_type](result=value)

        decoded = decode_response(encode_response(original), result_type)

        assert decoded.result == value


def test_encode_failure_roundtrip():
    original = FailureResponse(error_code=400, description="Bad Request: chat not found")

    assert decode_response(encode_response(original)) == original
