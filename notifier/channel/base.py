"""Channel abstraction: hold a message, report priority, render a delivery."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import ClassVar

from notifier.errors import require_text
from notifier.models import ChannelKind, Message, Priority


class Channel(ABC):
    """Abstract channel bound to one message snapshot and one identifier.

    ``default_priority`` is what ``priority()`` reports; it does not follow
    the held message's own priority unless a variant overrides ``priority``.
    """

    kind: ClassVar[ChannelKind]
    identifier_name: ClassVar[str] = "identifier"
    default_priority: ClassVar[Priority] = Priority.MEDIUM

    def __init__(self, message: Message, identifier: str) -> None:
        self._message = replace(message)
        self._identifier = require_text(identifier, self.identifier_name)

    @property
    def message(self) -> Message:
        return self._message

    @property
    def identifier(self) -> str:
        return self._identifier

    def priority(self) -> Priority:
        return self.default_priority

    @abstractmethod
    def deliver(self) -> str:
        """Return the rendered notification text; no I/O."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier_name}={self._identifier!r}, message={self._message!r})"
