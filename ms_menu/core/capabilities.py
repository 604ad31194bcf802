"""Terminal capability detection.

Every probe fails closed: a missing helper, an unreadable file or an odd
stream simply leaves the matching flag false. Nothing here raises.
"""

from __future__ import annotations

import logging
import os
import platform as _platform
import select
import sys
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any, Mapping

logger = logging.getLogger(__name__)

_PROC_VERSION = "/proc/version"


class Platform(str, Enum):
    MACOS = "macos"
    LINUX = "linux"
    WSL = "wsl"
    WINDOWS_SHELL = "windows_bash"
    OTHER = "other"


class HostTerminal(str, Enum):
    APPLE_TERMINAL = "apple_terminal"
    ITERM2 = "iterm2"
    TMUX = "tmux"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CapabilityDescriptor:
    is_interactive: bool = False
    supports_ansi_color: bool = False
    supports_cursor_addressing: bool = False
    supports_timed_read: bool = False
    supports_raw_input: bool = False
    platform: Platform = Platform.OTHER
    host_terminal: HostTerminal = HostTerminal.UNKNOWN
    colors: int = 0

    @property
    def is_legacy_host(self) -> bool:
        """Apple Terminal corrupts scrollback on in-place redraws."""
        return self.host_terminal is HostTerminal.APPLE_TERMINAL


@dataclass(frozen=True)
class TerminfoProbe:
    colors: int = 0
    cursor_addressing: bool = False


def _isatty(stream: Any) -> bool:
    try:
        return bool(stream is not None and stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


def _term_is_ansi(term: str) -> bool:
    return "color" in term or term.startswith("xterm") or term.startswith("screen")


def probe_terminfo(term: str | None, stream: IO[str] | None) -> TerminfoProbe:
    """Query terminfo for colour count and cursor addressing (``tput`` style)."""
    if not term or term == "dumb":
        return TerminfoProbe()
    try:
        import curses

        fd = stream.fileno() if stream is not None else -1
        curses.setupterm(term, fd)
        colors = curses.tigetnum("colors")
        cup = curses.tigetstr("cup")
    except Exception as exc:
        logger.debug("terminfo probe unavailable: %s", exc)
        return TerminfoProbe()
    return TerminfoProbe(colors=max(colors, 0), cursor_addressing=bool(cup))


def probe_timed_read(stream: IO[str] | None) -> bool:
    """Return True when a bounded read on ``stream`` can be performed."""
    if os.name == "nt" or not _isatty(stream):
        return False
    try:
        select.select([stream.fileno()], [], [], 0)
    except (OSError, ValueError) as exc:
        logger.debug("timed read probe failed: %s", exc)
        return False
    return True


def probe_raw_input(stream: IO[str] | None) -> bool:
    if not _isatty(stream):
        return False
    try:
        import termios  # noqa: F401
        import tty  # noqa: F401
    except ImportError:
        return False
    return True


def detect_platform(system: str | None = None, proc_version: str = _PROC_VERSION) -> Platform:
    name = system if system is not None else _platform.system()
    if name == "Darwin":
        return Platform.MACOS
    if name == "Linux":
        try:
            with open(proc_version, encoding="utf-8", errors="ignore") as handle:
                if "microsoft" in handle.read().lower():
                    return Platform.WSL
        except OSError:
            pass
        return Platform.LINUX
    if name == "Windows" or name.upper().startswith(("MINGW", "MSYS", "CYGWIN")):
        return Platform.WINDOWS_SHELL
    return Platform.OTHER


def detect_host_terminal(env: Mapping[str, str]) -> HostTerminal:
    program = env.get("TERM_PROGRAM", "")
    if program == "Apple_Terminal":
        return HostTerminal.APPLE_TERMINAL
    if program == "iTerm.app":
        return HostTerminal.ITERM2
    if env.get("TERM", "").startswith("screen") and env.get("TMUX"):
        return HostTerminal.TMUX
    return HostTerminal.UNKNOWN


def detect(
    *,
    env: Mapping[str, str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    system: str | None = None,
) -> CapabilityDescriptor:
    """Inspect the process environment once and describe the terminal."""
    env = os.environ if env is None else env
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    term = env.get("TERM", "")

    interactive = _isatty(stdout)
    terminfo = probe_terminfo(term, stdout) if interactive else TerminfoProbe()
    caps = CapabilityDescriptor(
        is_interactive=interactive,
        supports_ansi_color=_term_is_ansi(term) or terminfo.colors >= 8,
        supports_cursor_addressing=terminfo.cursor_addressing,
        supports_timed_read=probe_timed_read(stdin),
        supports_raw_input=probe_raw_input(stdin),
        platform=detect_platform(system),
        host_terminal=detect_host_terminal(env),
        colors=terminfo.colors,
    )
    logger.debug("detected terminal capabilities: %s", describe(caps))
    return caps


def describe(caps: CapabilityDescriptor) -> str:
    """Render the descriptor as the space separated capability words."""
    words: list[str] = []
    if caps.is_interactive:
        words.append("interactive")
    if caps.supports_ansi_color:
        words.append("ansi")
    if caps.colors >= 8:
        words.append("tput_colors")
    if caps.supports_cursor_addressing:
        words.append("cursor_movement")
    if caps.supports_timed_read:
        words.append("read_timeout")
    if caps.supports_raw_input:
        words.append("raw_input")
    if caps.platform is not Platform.OTHER:
        words.append(caps.platform.value)
    if caps.host_terminal is not HostTerminal.UNKNOWN:
        words.append(caps.host_terminal.value)
    return " ".join(words)
