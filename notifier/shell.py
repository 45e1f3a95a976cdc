"""Interactive menu shell driving the message store and channel registry.

Invalid input at any menu re-prompts in place. End of input behaves as Exit.
"""
from __future__ import annotations

import logging
from typing import Callable

from notifier.channel import make_channel
from notifier.errors import InvalidSelectionError, NotifierError, OutOfRangeError
from notifier.models import ChannelKind, MessageType, Priority
from notifier.registry import ChannelRegistry
from notifier.store import MessageStore

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[..., None]

MAIN_MENU = (
    "Create new message",
    "Add notification channel",
    "List saved messages",
    "Send all notifications",
    "Filter channels by type",
    "Exit",
)

IDENTIFIER_PROMPTS = {
    ChannelKind.EMAIL: "Email address",
    ChannelKind.SMS: "Phone number",
    ChannelKind.PUSH: "Device token",
}


class _Exit(Exception):
    pass


class Shell:
    """Numbered-menu REPL; owns one MessageStore and one ChannelRegistry."""

    def __init__(
        self,
        store: MessageStore | None = None,
        registry: ChannelRegistry | None = None,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ) -> None:
        self.store = store if store is not None else MessageStore()
        self.registry = registry if registry is not None else ChannelRegistry()
        self._input = input_fn or input
        self._out = output_fn or print
        self._actions: dict[int, Callable[[], None]] = {
            1: self.create_message,
            2: self.add_channel,
            3: self.list_messages,
            4: self.send_all,
            5: self.filter_channels,
        }

    def run(self) -> int:
        """Loop until Exit; return process exit code."""
        logger.info("shell started")
        try:
            while True:
                self._out("\n=== MAIN MENU ===")
                for number, label in enumerate(MAIN_MENU, start=1):
                    self._out(f"{number}. {label}")
                choice = self._ask_number("Choice: ", len(MAIN_MENU))
                if choice == len(MAIN_MENU):
                    raise _Exit
                self._actions[choice]()
        except (_Exit, EOFError, KeyboardInterrupt):
            self._out("\nDone. Goodbye!")
        logger.info("shell exited")
        return 0

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise _Exit from None

    def _ask_number(self, prompt: str, upper: int) -> int:
        while True:
            raw = self._read(prompt).strip()
            try:
                number = int(raw)
            except ValueError:
                number = 0
            if 1 <= number <= upper:
                return number
            self._out(f"Invalid option! Enter a number between 1 and {upper}")

    def _ask_choice(self, title: str, enum_cls):
        self._out(title)
        for number, member in enumerate(enum_cls, start=1):
            self._out(f"{number}. {member}")
        while True:
            try:
                return enum_cls.from_choice(self._read("Option: "))
            except InvalidSelectionError as e:
                self._out(f"Invalid option! {e}")

    def _ask_index(self) -> int:
        while True:
            raw = self._read("Select message ID: ").strip()
            try:
                index = int(raw)
                self.store.get(index)
                return index
            except (ValueError, OutOfRangeError):
                self._out(f"Invalid ID! Enter a number between 0 and {len(self.store) - 1}")

    def create_message(self) -> None:
        self._out("\n=== NEW MESSAGE ===")
        msg_type = self._ask_choice("Select the type:", MessageType)
        priority = self._ask_choice("Select the priority:", Priority)
        content = self._read("Content: ")
        try:
            index = self.store.create(msg_type, content, priority)
        except NotifierError as e:
            self._out(f"Invalid content: {e}")
            return
        self._out(f"Message created. ID: {index}")

    def add_channel(self) -> None:
        if not len(self.store):
            self._out("Create a message first!")
            return
        self._out("\n=== NEW CHANNEL ===")
        self.list_messages()
        message = self.store.get(self._ask_index())
        kind = self._ask_choice("Select the channel type:", ChannelKind)
        identifier = self._read(f"{IDENTIFIER_PROMPTS[kind]}: ")
        try:
            channel = make_channel(kind, message, identifier)
        except NotifierError as e:
            self._out(f"Could not create channel: {e}")
            return
        self.registry.add(channel)
        self._out("Channel added.")

    def list_messages(self) -> None:
        self._out("\n=== SAVED MESSAGES ===")
        for index, msg in self.store.list():
            self._out(f"[ID {index}] {msg.type} ({msg.priority})")
            self._out(f"Content: {msg.content}")

    def send_all(self) -> None:
        self._out("\n=== SENDING ===")
        report = self.registry.deliver_all()
        for text in report.rendered:
            self._out(text)
        self._out(f"Total sent: {report.count} notification(s)")

    def filter_channels(self) -> None:
        kind = self._ask_choice("Filter by:", ChannelKind)
        result = self.registry.filter_by_variant(kind)
        self._out(f"{kind} channels ({result.count}):")
        for channel in result.channels:
            self._out(channel.deliver())
