"""POSIX terminal access and the scoped raw-mode session."""

from __future__ import annotations

import atexit
import logging
import os
import select
import signal
import sys
import time
from types import FrameType
from typing import IO, Any, Callable, Dict, Iterable, Optional

from ms_common.errors import TerminalReadError
from ms_menu.core.protocols import Terminal
from ms_menu.core.theme import StylePalette

logger = logging.getLogger(__name__)


class PosixTerminal(Terminal):
    """Byte-level reads from ``stdin`` and text writes to ``output``."""

    def __init__(self, stdin: IO[str] | None = None, output: IO[str] | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._saved_attrs: Optional[list[Any]] = None

    def _fd(self) -> int:
        try:
            return self._stdin.fileno()
        except (AttributeError, ValueError, OSError) as exc:
            raise TerminalReadError("Terminal input is not readable", cause=exc) from exc

    def write(self, text: str) -> None:
        self._output.write(text)

    def flush(self) -> None:
        self._output.flush()

    def read_byte(self) -> bytes:
        try:
            data = os.read(self._fd(), 1)
        except OSError as exc:
            raise TerminalReadError("Cannot read from terminal", cause=exc) from exc
        if not data:
            raise TerminalReadError("Unexpected end of input")
        return data

    def read_bytes(self, count: int, timeout: float) -> bytes:
        """Read up to ``count`` bytes, giving up once ``timeout`` elapses."""
        fd = self._fd()
        deadline = time.monotonic() + timeout
        buf = b""
        while len(buf) < count:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            try:
                ready, _, _ = select.select([fd], [], [], remaining)
                if not ready:
                    break
                chunk = os.read(fd, count - len(buf))
            except OSError as exc:
                raise TerminalReadError("Cannot read from terminal", cause=exc) from exc
            if not chunk:
                break
            buf += chunk
        return buf

    def read_line(self) -> str:
        try:
            line = self._stdin.readline()
        except OSError as exc:
            raise TerminalReadError("Cannot read from terminal", cause=exc) from exc
        if not line:
            raise TerminalReadError("Unexpected end of input")
        return line.rstrip("\r\n")

    def enter_raw(self) -> None:
        """Disable line buffering, echo and signal keys; keep output processing."""
        import termios

        fd = self._fd()
        try:
            attrs = termios.tcgetattr(fd)
        except termios.error as exc:
            raise TerminalReadError("Terminal does not support raw mode", cause=exc) from exc
        self._saved_attrs = attrs
        raw = list(attrs)
        raw[6] = list(attrs[6])
        raw[3] = attrs[3] & ~(termios.ICANON | termios.ECHO | termios.ISIG)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, raw)

    def restore_mode(self) -> None:
        if self._saved_attrs is None:
            return
        import termios

        saved, self._saved_attrs = self._saved_attrs, None
        try:
            termios.tcsetattr(self._fd(), termios.TCSADRAIN, saved)
        except (termios.error, TerminalReadError) as exc:
            logger.warning("failed to restore terminal mode: %s", exc)


class TerminalSession:
    """Owns raw mode and cursor visibility for the life of one menu.

    Release runs exactly once, whichever comes first: leaving the ``with``
    block, interpreter exit, or SIGINT/SIGTERM. After a signal the
    previously installed handler still runs.
    """

    def __init__(
        self,
        terminal: Terminal,
        palette: StylePalette,
        *,
        raw: bool = True,
        enable_signals: bool = True,
        signals: Iterable[int] = (signal.SIGINT, signal.SIGTERM),
    ) -> None:
        self._terminal = terminal
        self._palette = palette
        self._raw = raw
        self._enable_signals = enable_signals
        self._signals = tuple(signals)
        self._prev_handlers: Dict[int, Any] = {}
        self._released = False
        self.cleanup: Optional[Callable[[], None]] = None

    @property
    def released(self) -> bool:
        return self._released

    def __enter__(self) -> "TerminalSession":
        atexit.register(self.release)
        if self._enable_signals:
            self._install_signal_handlers()
        if self._raw:
            try:
                self._terminal.enter_raw()
            except BaseException:
                self.release()
                raise
            self._terminal.write(self._palette.cursor_hide)
            self._terminal.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _install_signal_handlers(self) -> None:
        for sig in self._signals:
            try:
                prev = signal.getsignal(sig)
                if prev == signal.SIG_IGN:
                    # Ignored signals (nohup) must not end the menu.
                    continue
                self._prev_handlers[sig] = prev
                signal.signal(sig, self._handle_signal)  # type: ignore[arg-type]
            except (ValueError, OSError) as exc:
                # Not the main thread; release still runs on normal exit.
                logger.debug("cannot install handler for signal %s: %s", sig, exc)
                self._prev_handlers.pop(sig, None)

    def _restore_signal_handlers(self) -> None:
        for sig, handler in self._prev_handlers.items():
            try:
                signal.signal(sig, handler)  # type: ignore[arg-type]
            except (ValueError, OSError) as exc:
                logger.debug("cannot restore handler for signal %s: %s", sig, exc)
        self._prev_handlers.clear()

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        try:
            self._terminal.restore_mode()
            if self._raw:
                self._terminal.write(self._palette.cursor_show)
            if self.cleanup is not None:
                self.cleanup()
            self._terminal.flush()
        finally:
            self._restore_signal_handlers()
            atexit.unregister(self.release)

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        prev = self._prev_handlers.get(signum)
        self.release()
        logger.debug("menu interrupted by signal %s", signum)
        if prev is None:
            return
        if prev == signal.SIG_DFL:
            if signum == signal.SIGINT:
                signal.default_int_handler(signum, frame)
            raise SystemExit(128 + signum)
        if callable(prev):
            prev(signum, frame)
