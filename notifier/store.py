"""Message store: append-only, indexed by creation order."""
from __future__ import annotations

import logging
from typing import Iterator

from notifier.errors import OutOfRangeError, require_text
from notifier.models import Message, MessageType, Priority

logger = logging.getLogger(__name__)


class MessageStore:
    def __init__(self) -> None:
        self._messages: list[Message] = []

    def __len__(self) -> int:
        return len(self._messages)

    def create(
        self,
        type: MessageType,
        content: str,
        priority: Priority = Priority.MEDIUM,
    ) -> int:
        """Store a new message and return its index; raise ValidationError on empty content."""
        require_text(content, "content")
        self._messages.append(Message(type=type, content=content, priority=priority))
        index = len(self._messages) - 1
        logger.info("message stored index=%s type=%s priority=%s", index, type, priority)
        return index

    def get(self, index: int) -> Message:
        if not 0 <= index < len(self._messages):
            raise OutOfRangeError(
                f"message index {index} out of range (have {len(self._messages)})"
            )
        return self._messages[index]

    def list(self) -> list[tuple[int, Message]]:
        """Snapshot of (index, message) pairs in creation order."""
        return list(enumerate(self._messages))

    def __iter__(self) -> Iterator[tuple[int, Message]]:
        return iter(self.list())
