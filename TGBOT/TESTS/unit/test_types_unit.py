# Руководство к файлу (TESTS/unit/test_types_unit.py)
# Назначение:
# - Unit-тесты TYPES: выбор варианта по дискриминатору, алиасы полей,
#   вспомогательные свойства объектов.

from __future__ import annotations

import orjson
import pytest
from pydantic import TypeAdapter, ValidationError

from TGBOT.CLIENT.body import build_request_body
from TGBOT.METHODS.commands import SetMyCommands
from TGBOT.TYPES.chat_member import ChatMember, ChatMemberLeft, ChatMemberRestricted
from TGBOT.TYPES.commands import BotCommand, BotCommandScope, BotCommandScopeChatMember
from TGBOT.TYPES.update import Update
from TGBOT.TYPES.user import User


def test_chat_member_variant_by_status():
    adapter = TypeAdapter(ChatMember)

    left = adapter.validate_python({"status": "left", "user": {"id": 1, "first_name": "A"}})
    restricted = adapter.validate_python(
        {"status": "restricted", "user": {"id": 2, "first_name": "B"}, "can_send_messages": True, "until_date": 5}
    )

    assert isinstance(left, ChatMemberLeft)
    assert isinstance(restricted, ChatMemberRestricted)
    assert restricted.until_date == 5


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        TypeAdapter(ChatMember).validate_python({"status": "ghost", "user": {"id": 1, "first_name": "A"}})


def test_command_scope_variant_by_type():
    scope = TypeAdapter(BotCommandScope).validate_python({"type": "chat_member", "chat_id": "@chan", "user_id": 3})

    assert isinstance(scope, BotCommandScopeChatMember)
    assert scope.chat_id == "@chan"


def test_scope_discriminant_is_written_to_json():
    method = SetMyCommands(
        commands=[BotCommand(command="start", description="Start")],
        scope=BotCommandScopeChatMember(chat_id=1, user_id=2),
    )

    assert orjson.loads(build_request_body(method).content) == {
        "commands": [{"command": "start", "description": "Start"}],
        "scope": {"type": "chat_member", "chat_id": 1, "user_id": 2},
    }


def test_update_effective_message():
    update = Update.model_validate(
        {
            "update_id": 1,
            "edited_message": {"message_id": 3, "date": 0, "chat": {"id": 1, "type": "group"}, "text": "x"},
        }
    )

    assert update.effective_message.message_id == 3
    assert Update(update_id=2).effective_message is None


def test_user_full_name():
    assert User(id=1, first_name="Ann").full_name == "Ann"
    assert User(id=1, first_name="Ann", last_name="Lee").full_name == "Ann Lee"
