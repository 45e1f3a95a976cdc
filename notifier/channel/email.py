"""Email channel."""
from __future__ import annotations

from notifier.channel.base import Channel
from notifier.models import ChannelKind, Priority

URGENT_MARKER = "[URGENT] "


class EmailChannel(Channel):
    """Email delivery; high-priority messages carry the urgency marker."""

    kind = ChannelKind.EMAIL
    identifier_name = "address"

    @property
    def address(self) -> str:
        return self.identifier

    def deliver(self) -> str:
        msg = self.message
        urgent = URGENT_MARKER if msg.priority is Priority.HIGH else ""
        return f"[EMAIL] {msg.type} {urgent}to {self.address}: {msg.content}"
