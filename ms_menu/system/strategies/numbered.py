from __future__ import annotations

import logging
from typing import Sequence

from ms_common.errors import UsageError
from ms_menu.core.keys import DEFAULT_ESCAPE_TIMEOUT, parse_choice
from ms_menu.core.models import MenuResult, Option
from ms_menu.core.protocols import MenuStrategy, Terminal
from ms_menu.core.theme import StylePalette
from ms_menu.system.terminal import TerminalSession

logger = logging.getLogger(__name__)


class NumberedStrategy(MenuStrategy):
    """Prints a 1-based list once and reads whole lines; needs no raw input."""

    name = "numbered"

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
        # Whole lines are read, so there is no escape sequence to wait for.
        self.escape_timeout = escape_timeout
        self.enable_signals = enable_signals

    def render(self, options: Sequence[Option], focus: int, palette: StylePalette) -> int:
        _ = focus
        for idx, option in enumerate(options, start=1):
            self.terminal.write(f"{idx}. {option.label}\n")
        self.terminal.write("\n")
        return len(options) + 1

    def clear(self, line_count: int, palette: StylePalette) -> None:
        # The list stays on screen as a record of the choice.
        _ = (line_count, palette)

    def run(self, prompt: str, options: Sequence[Option]) -> MenuResult:
        count = len(options)
        if not count:
            raise UsageError("No options provided")
        with TerminalSession(
            self.terminal, self.palette, raw=False, enable_signals=self.enable_signals
        ) as scope:
            self.terminal.write(f"{prompt}\n\n")
            self.render(options, 0, self.palette)
            try:
                while not scope.released:
                    self.terminal.write(f"Enter choice (1-{count}) or q to quit: ")
                    self.terminal.flush()
                    choice = parse_choice(self.terminal.read_line(), count)
                    if choice.cancelled:
                        return MenuResult.cancel()
                    if choice.error is not None:
                        logger.debug("rejected numbered input: %s", choice.error)
                        self.terminal.write(f"{choice.error}\n")
                        continue
                    return MenuResult.selected(options, choice.index)
            except KeyboardInterrupt:
                pass
        return MenuResult.cancel()
