"""Channel registry: ordered, append-only; deliver-all and filter-by-kind."""
from __future__ import annotations

import logging
from typing import Iterator

from notifier.channel import Channel
from notifier.models import ChannelKind, DeliveryReport, FilterResult

logger = logging.getLogger(__name__)


class ChannelRegistry:
    def __init__(self) -> None:
        self._channels: list[Channel] = []

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[Channel]:
        return iter(list(self._channels))

    def add(self, channel: Channel) -> None:
        if not isinstance(channel, Channel):
            raise TypeError(f"expected a Channel, got {type(channel).__name__}")
        self._channels.append(channel)
        logger.info(
            "channel registered kind=%s position=%s", channel.kind, len(self._channels) - 1
        )

    def deliver_all(self) -> DeliveryReport:
        """Render every channel in registration order."""
        report = DeliveryReport(rendered=[ch.deliver() for ch in self._channels])
        logger.info("delivered %s notification(s)", report.count)
        return report

    def filter_by_variant(self, kind: ChannelKind | str) -> FilterResult:
        kind = ChannelKind.parse(kind)
        matches = [ch for ch in self._channels if ch.kind is kind]
        logger.debug("filter kind=%s matched=%s of %s", kind, len(matches), len(self._channels))
        return FilterResult(kind=kind, channels=matches)
