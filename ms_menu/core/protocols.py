from __future__ import annotations

from typing import Protocol, Sequence

from ms_menu.core.models import MenuResult, Option
from ms_menu.core.theme import StylePalette


class Terminal(Protocol):
    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def read_byte(self) -> bytes: ...

    def read_bytes(self, count: int, timeout: float) -> bytes: ...

    def read_line(self) -> str: ...

    def enter_raw(self) -> None: ...

    def restore_mode(self) -> None: ...


class MenuStrategy(Protocol):
    def render(self, options: Sequence[Option], focus: int, palette: StylePalette) -> int: ...

    def clear(self, line_count: int, palette: StylePalette) -> None: ...

    def run(self, prompt: str, options: Sequence[Option]) -> MenuResult: ...


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...

    def emit_header(self, title: str) -> None: ...

    def emit_styled(self, color: str, message: str) -> None: ...


class Presenter(Protocol):
    def header(self, title: str) -> None: ...

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def guide(self, message: str) -> None: ...

    def prompt(self, message: str) -> None: ...
