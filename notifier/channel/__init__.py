"""Channel layer: base + Email/SMS/Push; factory by kind."""
from __future__ import annotations

from notifier.channel.base import Channel
from notifier.channel.email import URGENT_MARKER, EmailChannel
from notifier.channel.push import PushChannel
from notifier.channel.sms import SMSChannel
from notifier.models import ChannelKind, Message

_CHANNELS: dict[ChannelKind, type[Channel]] = {
    ChannelKind.EMAIL: EmailChannel,
    ChannelKind.SMS: SMSChannel,
    ChannelKind.PUSH: PushChannel,
}


def get_channel(kind: ChannelKind | str) -> type[Channel]:
    """Return channel class for a kind (enum, name or menu number)."""
    kind = ChannelKind.parse(kind)
    return _CHANNELS[kind]


def make_channel(kind: ChannelKind | str, message: Message, identifier: str) -> Channel:
    """Build a channel; raises ValidationError if identifier is empty."""
    return get_channel(kind)(message, identifier)


def make_email(message: Message, address: str) -> EmailChannel:
    return EmailChannel(message, address)


def make_sms(message: Message, phone_number: str) -> SMSChannel:
    return SMSChannel(message, phone_number)


def make_push(message: Message, device_token: str) -> PushChannel:
    return PushChannel(message, device_token)


__all__ = [
    "Channel",
    "EmailChannel",
    "PushChannel",
    "SMSChannel",
    "URGENT_MARKER",
    "get_channel",
    "make_channel",
    "make_email",
    "make_push",
    "make_sms",
]
