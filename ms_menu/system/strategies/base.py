from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from ms_menu.core.keys import DEFAULT_ESCAPE_TIMEOUT, KeyReader
from ms_menu.core.models import KeyEvent, MenuResult, Option
from ms_menu.core.protocols import MenuStrategy, Terminal
from ms_menu.core.state import MenuSession
from ms_menu.core.theme import StylePalette
from ms_menu.system.terminal import TerminalSession

logger = logging.getLogger(__name__)


class RawKeyStrategy(MenuStrategy, ABC):
    """Render/read loop shared by the single-key strategies.

    Subclasses only decide how a frame is drawn and erased.
    """

    name = "raw"
    aliases: Mapping[bytes, KeyEvent] | None = None

    def __init__(
        self,
        terminal: Terminal,
        palette: StylePalette,
        *,
        escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT,
        enable_signals: bool = True,
    ) -> None:
        self.terminal = terminal
        self.palette = palette
        self.escape_timeout = escape_timeout
        self.enable_signals = enable_signals
        self.prompt = ""
        self._lines = 0

    def begin(self, prompt: str) -> None:
        self.prompt = prompt

    @abstractmethod
    def render(self, options: Sequence[Option], focus: int, palette: StylePalette) -> int:
        """Draw one frame and return how many lines it occupies."""

    @abstractmethod
    def clear(self, line_count: int, palette: StylePalette) -> None:
        """Erase the last frame of ``line_count`` lines."""

    def run(self, prompt: str, options: Sequence[Option]) -> MenuResult:
        session = MenuSession(options)
        reader = KeyReader(self.terminal, self.escape_timeout, self.aliases)
        self._lines = 0
        with TerminalSession(
            self.terminal, self.palette, enable_signals=self.enable_signals
        ) as scope:
            scope.cleanup = lambda: self.clear(self._lines, self.palette)
            self.begin(prompt)
            try:
                while not session.done:
                    self._lines = self.render(options, session.focus, self.palette)
                    self.terminal.flush()
                    event = reader.read_key()
                    if scope.released:
                        session.cancel()
                        break
                    session.handle(event)
            except KeyboardInterrupt:
                session.cancel()
        logger.debug("%s menu finished: %s", self.name, session.outcome)
        return session.result()
