"""Push notification channel."""
from __future__ import annotations

from notifier.channel.base import Channel
from notifier.models import ChannelKind


class PushChannel(Channel):
    """Push to a single device token."""

    kind = ChannelKind.PUSH
    identifier_name = "device_token"

    @property
    def device_token(self) -> str:
        return self.identifier

    def deliver(self) -> str:
        msg = self.message
        return f"[PUSH] {msg.type} to device {self.device_token}: {msg.content}"
