from __future__ import annotations

from typing import IO

from ms_menu.core import theme
from ms_menu.core.protocols import Presenter, PresenterSink
from ms_menu.core.theme import StylePalette


class _PaletteSink(PresenterSink):
    def __init__(self, stream: IO[str], palette: StylePalette) -> None:
        self._stream = stream
        self._palette = palette

    def _print(self, text: str) -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()

    def emit(self, level: str, message: str) -> None:
        self._print(theme.presenter_message(self._palette, level, message))

    def emit_header(self, title: str) -> None:
        self._print(theme.header_block(self._palette, title))

    def emit_styled(self, color: str, message: str) -> None:
        self._print(theme.emphasis(self._palette, color, message))


class PresenterBase(Presenter):
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def header(self, title: str) -> None:
        self._sink.emit_header(title)

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def guide(self, message: str) -> None:
        self._sink.emit_styled("blue", message)

    def prompt(self, message: str) -> None:
        self._sink.emit_styled("cyan", message)


class PalettePresenter(PresenterBase):
    """Colour-aware status lines styled by the session palette."""

    def __init__(self, stream: IO[str], palette: StylePalette) -> None:
        super().__init__(_PaletteSink(stream, palette))
