"""Runner: load a YAML scenario, build messages and channels, send or filter."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import yaml

from notifier.channel import make_channel
from notifier.errors import NotifierError
from notifier.models import ChannelKind, DeliveryReport, FilterResult, MessageType, Priority
from notifier.registry import ChannelRegistry
from notifier.store import MessageStore

logger = logging.getLogger(__name__)


def load_scenario(path: str | Path) -> dict:
    """Load YAML scenario from path."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def validate_scenario(scenario: dict) -> None:
    """Validate messages and channels; raise ValueError on error."""
    if not isinstance(scenario, dict):
        raise ValueError("scenario: top level must be a dict")
    messages = scenario.get("messages")
    channels = scenario.get("channels")
    if messages is None:
        messages = []
    if channels is None:
        channels = []
    if not isinstance(messages, list):
        raise ValueError("scenario: messages must be a list")
    if not isinstance(channels, list):
        raise ValueError("scenario: channels must be a list")

    for i, msg in enumerate(messages):
        if not isinstance(msg, dict):
            raise ValueError(f"scenario: messages[{i}] must be a dict")
        if not msg.get("type"):
            raise ValueError(f"scenario: messages[{i}] missing 'type'")
        if not isinstance(msg.get("content"), str):
            raise ValueError(f"scenario: messages[{i}].content must be a string")

    for j, ch in enumerate(channels):
        if not isinstance(ch, dict):
            raise ValueError(f"scenario: channels[{j}] must be a dict")
        if not ch.get("kind"):
            raise ValueError(f"scenario: channels[{j}] missing 'kind'")
        ref = ch.get("message")
        if not isinstance(ref, int) or isinstance(ref, bool):
            raise ValueError(f"scenario: channels[{j}].message must be an integer index")
        if "identifier" not in ch:
            raise ValueError(f"scenario: channels[{j}] missing 'identifier'")


def build(scenario: dict) -> tuple[MessageStore, ChannelRegistry]:
    """Create the store and registry described by a validated scenario."""
    store = MessageStore()
    registry = ChannelRegistry()
    for i, msg in enumerate(scenario.get("messages") or []):
        try:
            store.create(
                MessageType.parse(msg["type"]),
                msg["content"],
                Priority.parse(
                    Priority.MEDIUM if msg.get("priority") is None else msg["priority"]
                ),
            )
        except NotifierError as e:
            raise type(e)(f"scenario: messages[{i}]: {e}") from e
    for j, ch in enumerate(scenario.get("channels") or []):
        try:
            message = store.get(ch["message"])
            identifier = ch["identifier"]
            if identifier is not None:
                identifier = str(identifier)
            registry.add(make_channel(ch["kind"], message, identifier))
        except NotifierError as e:
            raise type(e)(f"scenario: channels[{j}]: {e}") from e
    return store, registry


def run(
    scenario_path: str | Path,
    filter_kind: str | None = None,
    output_fn: Callable[..., None] = print,
) -> DeliveryReport | FilterResult:
    """Load, validate and build the scenario, then send all or filter by kind."""
    path = Path(scenario_path)
    if not path.exists():
        raise FileNotFoundError(f"scenario not found: {path}")

    scenario = load_scenario(path)
    validate_scenario(scenario)
    store, registry = build(scenario)
    logger.info(
        "scenario %s: %s message(s), %s channel(s)", path, len(store), len(registry)
    )

    if filter_kind is not None:
        result = registry.filter_by_variant(ChannelKind.parse(filter_kind))
        output_fn(f"{result.kind} channels ({result.count}):")
        for channel in result.channels:
            output_fn(channel.deliver())
        return result

    report = registry.deliver_all()
    for text in report.rendered:
        output_fn(text)
    output_fn(f"Total sent: {report.count} notification(s)")
    return report
