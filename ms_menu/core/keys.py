"""Raw key reading and classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from ms_menu.core.models import KeyEvent
from ms_menu.core.protocols import Terminal

logger = logging.getLogger(__name__)

ESCAPE = b"\x1b"
CTRL_C = b"\x03"
DEFAULT_ESCAPE_TIMEOUT = 0.1

_ESCAPE_SEQUENCES: dict[bytes, KeyEvent] = {
    b"[A": KeyEvent.UP,
    b"[B": KeyEvent.DOWN,
    b"OA": KeyEvent.UP,
    b"OB": KeyEvent.DOWN,
}

_SINGLE_KEYS: dict[bytes, KeyEvent] = {
    b"": KeyEvent.CONFIRM,
    b"\n": KeyEvent.CONFIRM,
    b"\r": KeyEvent.CONFIRM,
    CTRL_C: KeyEvent.CANCEL,
    b"q": KeyEvent.CANCEL,
    b"Q": KeyEvent.CANCEL,
}

WASD_ALIASES: Mapping[bytes, KeyEvent] = {
    b"w": KeyEvent.UP,
    b"W": KeyEvent.UP,
    b"s": KeyEvent.DOWN,
    b"S": KeyEvent.DOWN,
}


def classify(key: bytes, aliases: Mapping[bytes, KeyEvent] | None = None) -> KeyEvent:
    """Map one raw key (a byte, or ESC plus continuation) to an intent.

    A lone escape, or one followed by an unknown continuation, is OTHER so
    the loop redraws instead of exiting.
    """
    if key.startswith(ESCAPE):
        return _ESCAPE_SEQUENCES.get(key[1:3], KeyEvent.OTHER)
    event = _SINGLE_KEYS.get(key)
    if event is not None:
        return event
    if aliases:
        return aliases.get(key, KeyEvent.OTHER)
    return KeyEvent.OTHER


class KeyReader:
    """Reads one key press at a time from a raw-mode terminal."""

    def __init__(
        self,
        terminal: Terminal,
        escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT,
        aliases: Mapping[bytes, KeyEvent] | None = None,
    ) -> None:
        self._terminal = terminal
        self._escape_timeout = escape_timeout
        self._aliases = aliases

    def read_raw(self) -> bytes:
        first = self._terminal.read_byte()
        if first != ESCAPE:
            return first
        continuation = self._terminal.read_bytes(2, self._escape_timeout)
        if not continuation:
            logger.debug("lone escape ignored")
        return first + continuation

    def read_key(self) -> KeyEvent:
        return classify(self.read_raw(), self._aliases)


@dataclass(frozen=True)
class LineChoice:
    """Parsed numbered-menu input: an index, a cancel, or an error message."""

    index: int | None = None
    cancelled: bool = False
    error: str | None = None


def parse_choice(text: str, count: int) -> LineChoice:
    choice = text.strip()
    if choice in ("q", "Q"):
        return LineChoice(cancelled=True)
    if not (choice.isascii() and choice.isdigit()):
        return LineChoice(error=f"Invalid input. Please enter a number between 1 and {count}.")
    number = int(choice)
    if not 1 <= number <= count:
        return LineChoice(error=f"Invalid choice. Please enter a number between 1 and {count}.")
    return LineChoice(index=number - 1)
