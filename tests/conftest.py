"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from notifier.models import Message, MessageType, Priority
from notifier.registry import ChannelRegistry
from notifier.store import MessageStore


@pytest.fixture
def store() -> MessageStore:
    return MessageStore()


@pytest.fixture
def registry() -> ChannelRegistry:
    return ChannelRegistry()


@pytest.fixture
def alert_message() -> Message:
    return Message(type=MessageType.ALERT, content="Server down", priority=Priority.HIGH)


@pytest.fixture
def reminder_message() -> Message:
    return Message(type=MessageType.REMINDER, content="Standup at 10:00")
