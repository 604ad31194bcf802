from __future__ import annotations

from typing import Sequence

from ms_menu.core.models import Option
from ms_menu.core.theme import StylePalette
from ms_menu.system.strategies.base import RawKeyStrategy


class CursorStrategy(RawKeyStrategy):
    """Redraws the list in place by moving the cursor back over the last frame."""

    name = "cursor"

    def begin(self, prompt: str) -> None:
        super().begin(prompt)
        self.terminal.write(f"{prompt}\n")

    def render(self, options: Sequence[Option], focus: int, palette: StylePalette) -> int:
        self.terminal.write(palette.cursor_up(self._lines))
        for idx, option in enumerate(options):
            if idx == focus:
                line = f" >{palette.highlight_on} {option.label} {palette.highlight_off}"
            else:
                line = f"   {option.label}"
            self.terminal.write(f"{palette.clear_line}{line}\n")
        return len(options)

    def clear(self, line_count: int, palette: StylePalette) -> None:
        if line_count <= 0:
            return
        self.terminal.write(palette.cursor_up(line_count))
        for _ in range(line_count):
            self.terminal.write(f"{palette.clear_line}\n")
        self.terminal.write(palette.cursor_up(line_count))
