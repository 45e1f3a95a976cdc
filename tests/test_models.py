"""Tests for enums and the message model."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from notifier.errors import InvalidSelection, InvalidSelectionError, ValidationError
from notifier.models import ChannelKind, Message, MessageType, Priority


class TestPriority:
    def test_default_message_priority_is_medium(self) -> None:
        msg = Message(type=MessageType.PROMOTION, content="Sale")
        assert msg.priority is Priority.MEDIUM

    def test_priorities_are_ordered(self) -> None:
        assert Priority.LOW < Priority.MEDIUM < Priority.HIGH
        assert Priority.HIGH >= Priority.HIGH
        assert sorted([Priority.HIGH, Priority.LOW, Priority.MEDIUM]) == [
            Priority.LOW,
            Priority.MEDIUM,
            Priority.HIGH,
        ]

    def test_priority_is_mutable_on_message(self) -> None:
        msg = Message(type=MessageType.ALERT, content="Disk full")
        msg.priority = Priority.HIGH
        assert msg.priority is Priority.HIGH


class TestChoiceParsing:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", MessageType.PROMOTION), ("2", MessageType.REMINDER), (" 3 ", MessageType.ALERT)],
    )
    def test_from_choice_menu_numbers(self, raw: str, expected: MessageType) -> None:
        assert MessageType.from_choice(raw) is expected

    @pytest.mark.parametrize("raw", ["0", "4", "-1", "abc", ""])
    def test_from_choice_rejects_out_of_set(self, raw: str) -> None:
        with pytest.raises(InvalidSelectionError):
            Priority.from_choice(raw)

    def test_parse_accepts_names_and_labels(self) -> None:
        assert ChannelKind.parse("email") is ChannelKind.EMAIL
        assert ChannelKind.parse("SMS") is ChannelKind.SMS
        assert ChannelKind.parse("Push") is ChannelKind.PUSH
        assert ChannelKind.parse(ChannelKind.PUSH) is ChannelKind.PUSH
        assert Priority.parse("high") is Priority.HIGH
        assert MessageType.parse(3) is MessageType.ALERT

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(InvalidSelection):
            ChannelKind.parse("fax")

    def test_str_uses_display_name(self) -> None:
        assert str(MessageType.ALERT) == "Alert"
        assert str(Priority.MEDIUM) == "Medium"
        assert f"{ChannelKind.SMS}" == "SMS"


class TestMessageInvariants:
    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_empty_content_rejected(self, content) -> None:
        with pytest.raises(ValidationError):
            Message(type=MessageType.ALERT, content=content)

    def test_type_and_content_cannot_be_reassigned(self) -> None:
        msg = Message(type=MessageType.ALERT, content="Server down")
        with pytest.raises(FrozenInstanceError):
            msg.content = ""
        with pytest.raises(FrozenInstanceError):
            msg.type = MessageType.PROMOTION
        assert (msg.type, msg.content) == (MessageType.ALERT, "Server down")
