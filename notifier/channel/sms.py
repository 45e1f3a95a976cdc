"""SMS channel."""
from __future__ import annotations

from notifier.channel.base import Channel
from notifier.models import ChannelKind


class SMSChannel(Channel):
    kind = ChannelKind.SMS
    identifier_name = "phone_number"

    @property
    def phone_number(self) -> str:
        return self.identifier

    def deliver(self) -> str:
        msg = self.message
        return f"[SMS] {msg.type} to {self.phone_number}: {msg.content}"
