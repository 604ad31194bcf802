from __future__ import annotations

from typing import Sequence

from ms_menu.core.keys import WASD_ALIASES
from ms_menu.core.models import Option
from ms_menu.core.theme import StylePalette
from ms_menu.system.strategies.base import RawKeyStrategy

HELP_LINE = "Use w/s or arrow keys to move, Enter to select, q to quit"


class ClearScreenStrategy(RawKeyStrategy):
    """Clears the screen and reprints prompt and list on every frame."""

    name = "clear"
    aliases = WASD_ALIASES

    def _clear_screen(self, palette: StylePalette) -> None:
        # Without ANSI the frames are only separated, not erased.
        self.terminal.write(palette.clear_screen or "\n")

    def render(self, options: Sequence[Option], focus: int, palette: StylePalette) -> int:
        self._clear_screen(palette)
        self.terminal.write(f"{self.prompt}\n\n")
        for idx, option in enumerate(options):
            if idx == focus:
                self.terminal.write(
                    f" >> {palette.highlight_on}{option.label}{palette.highlight_off} <<\n"
                )
            else:
                self.terminal.write(f"    {option.label}\n")
        self.terminal.write(f"\n{HELP_LINE}\n")
        return len(options) + 4

    def clear(self, line_count: int, palette: StylePalette) -> None:
        if line_count > 0:
            self._clear_screen(palette)
