"""Tests for the message store."""

from __future__ import annotations

import pytest

from notifier.errors import OutOfRange, ValidationError
from notifier.models import MessageType, Priority
from notifier.store import MessageStore


class TestCreate:
    @pytest.mark.parametrize(
        ("msg_type", "content", "priority"),
        [
            (MessageType.PROMOTION, "50% off", Priority.LOW),
            (MessageType.REMINDER, "Standup", Priority.MEDIUM),
            (MessageType.ALERT, "Server down", Priority.HIGH),
        ],
    )
    def test_create_then_get_returns_same_fields(
        self, store: MessageStore, msg_type, content, priority
    ) -> None:
        index = store.create(msg_type, content, priority)
        msg = store.get(index)
        assert (msg.type, msg.content, msg.priority) == (msg_type, content, priority)

    def test_indices_follow_creation_order(self, store: MessageStore) -> None:
        assert store.create(MessageType.ALERT, "a") == 0
        assert store.create(MessageType.ALERT, "b") == 1
        assert store.create(MessageType.ALERT, "c") == 2
        assert len(store) == 3

    def test_default_priority_medium(self, store: MessageStore) -> None:
        index = store.create(MessageType.REMINDER, "Pay rent")
        assert store.get(index).priority is Priority.MEDIUM

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_empty_content_rejected(self, store: MessageStore, content: str) -> None:
        with pytest.raises(ValidationError):
            store.create(MessageType.ALERT, content)
        assert len(store) == 0

    def test_content_not_stripped(self, store: MessageStore) -> None:
        index = store.create(MessageType.ALERT, "  padded  ")
        assert store.get(index).content == "  padded  "


class TestGet:
    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_out_of_range(self, store: MessageStore, index: int) -> None:
        store.create(MessageType.ALERT, "only one")
        with pytest.raises(OutOfRange):
            store.get(index)

    def test_empty_store(self, store: MessageStore) -> None:
        with pytest.raises(IndexError):
            store.get(0)


class TestList:
    def test_list_in_creation_order(self, store: MessageStore) -> None:
        store.create(MessageType.PROMOTION, "first")
        store.create(MessageType.ALERT, "second", Priority.HIGH)
        listed = store.list()
        assert [i for i, _ in listed] == [0, 1]
        assert [m.content for _, m in listed] == ["first", "second"]

    def test_list_is_restartable_snapshot(self, store: MessageStore) -> None:
        store.create(MessageType.PROMOTION, "first")
        view = store.list()
        view.clear()
        assert len(store.list()) == 1
        assert list(store) == list(store)


class TestStoredMessagesAreFixed:
    def test_listed_message_content_cannot_change(self, store: MessageStore) -> None:
        index = store.create(MessageType.ALERT, "Server down")
        with pytest.raises(AttributeError):
            store.list()[0][1].content = ""
        with pytest.raises(AttributeError):
            store.get(index).type = MessageType.REMINDER
        assert store.get(index).content == "Server down"
        assert store.get(index).type is MessageType.ALERT
