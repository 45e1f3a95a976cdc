"""Core data models: message, priority and channel kinds."""
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from notifier.errors import InvalidSelectionError, require_text

if TYPE_CHECKING:
    from notifier.channel.base import Channel


class _Choice(Enum):
    """Enum with a display name, parsable from menu numbers and names."""

    def __new__(cls, value: int, label: str):
        obj = object.__new__(cls)
        obj._value_ = value
        obj.label = label
        return obj

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_choice(cls, choice: int | str):
        """Resolve a 1-based menu number; raise InvalidSelectionError otherwise."""
        try:
            number = int(str(choice).strip())
        except ValueError:
            raise InvalidSelectionError(f"not a number: {choice!r}") from None
        members = list(cls)
        if not 1 <= number <= len(members):
            raise InvalidSelectionError(f"choose a number between 1 and {len(members)}")
        return members[number - 1]

    @classmethod
    def parse(cls, raw: str | int):
        """Accept member name, display name (any case) or menu number."""
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip()
        for member in cls:
            if text.lower() in (member.name.lower(), member.label.lower()):
                return member
        if text.isdigit():
            return cls.from_choice(text)
        raise InvalidSelectionError(f"unknown {cls.__name__}: {raw!r}")


class MessageType(_Choice):
    PROMOTION = (1, "Promotion")
    REMINDER = (2, "Reminder")
    ALERT = (3, "Alert")


class Priority(_Choice):
    """Ordered priority; compare with <, >."""

    LOW = (1, "Low")
    MEDIUM = (2, "Medium")
    HIGH = (3, "High")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value >= other.value


class ChannelKind(_Choice):
    EMAIL = (1, "Email")
    SMS = (2, "SMS")
    PUSH = (3, "Push")


_READ_ONLY = frozenset({"type", "content"})


@dataclass
class Message:
    """A composed notification; channels hold their own copy of it.

    ``type`` and ``content`` are fixed once set; only ``priority`` may change.
    """

    type: MessageType
    content: str
    priority: Priority = Priority.MEDIUM

    def __post_init__(self) -> None:
        require_text(self.content, "content")

    def __setattr__(self, name: str, value: object) -> None:
        if name in _READ_ONLY and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        object.__setattr__(self, name, value)


@dataclass
class DeliveryReport:
    """Rendered texts of a send-all run, in registry order."""

    rendered: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.rendered)


@dataclass
class FilterResult:
    """Channels of one kind, in registry order."""

    kind: ChannelKind
    channels: list[Channel] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.channels)
