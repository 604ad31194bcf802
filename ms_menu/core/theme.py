from __future__ import annotations

from dataclasses import dataclass

from ms_menu.core.capabilities import CapabilityDescriptor

ESC = "\033"

_ANSI_COLORS: dict[str, str] = {
    "red": f"{ESC}[0;31m",
    "green": f"{ESC}[0;32m",
    "yellow": f"{ESC}[0;33m",
    "blue": f"{ESC}[0;34m",
    "magenta": f"{ESC}[0;35m",
    "cyan": f"{ESC}[0;36m",
    "white": f"{ESC}[0;37m",
    "bold": f"{ESC}[1m",
    "underline": f"{ESC}[4m",
    "reverse": f"{ESC}[7m",
    "reset": f"{ESC}[0m",
}

CURSOR_HIDE = f"{ESC}[?25l"
CURSOR_SHOW = f"{ESC}[?25h"
CLEAR_LINE = f"{ESC}[K"
CLEAR_SCREEN = f"{ESC}[H{ESC}[2J"


@dataclass(frozen=True)
class StylePalette:
    """Resolved control strings; every field is empty when unsupported."""

    red: str = ""
    green: str = ""
    yellow: str = ""
    blue: str = ""
    magenta: str = ""
    cyan: str = ""
    white: str = ""
    bold: str = ""
    underline: str = ""
    reverse: str = ""
    reset: str = ""
    cursor_hide: str = ""
    cursor_show: str = ""
    clear_line: str = ""
    clear_screen: str = ""
    cursor_movement: bool = False

    @property
    def highlight_on(self) -> str:
        return f"{self.green}{self.bold}"

    @property
    def highlight_off(self) -> str:
        return self.reset

    @property
    def has_color(self) -> bool:
        return bool(self.reset)

    def cursor_up(self, lines: int) -> str:
        if not self.cursor_movement or lines <= 0:
            return ""
        return f"{ESC}[{lines}A"


PLAIN = StylePalette()


def resolve(caps: CapabilityDescriptor, *, no_color: bool = False) -> StylePalette:
    """Map a capability descriptor to a palette.

    Colours follow ``supports_ansi_color``. Cursor control additionally
    requires a host that tolerates in-place redraw, so Apple Terminal only
    ever gets colour.
    """
    colors = _ANSI_COLORS if caps.supports_ansi_color and not no_color else {}
    cursor = (
        caps.supports_cursor_addressing or caps.supports_ansi_color
    ) and not caps.is_legacy_host
    return StylePalette(
        **colors,
        cursor_hide=CURSOR_HIDE if cursor else "",
        cursor_show=CURSOR_SHOW if cursor else "",
        clear_line=CLEAR_LINE if cursor else "",
        clear_screen=CLEAR_SCREEN if caps.supports_ansi_color else "",
        cursor_movement=cursor,
    )


PRESENTER_TEMPLATES: dict[str, tuple[str, str]] = {
    "info": ("blue", "[INFO]"),
    "success": ("green", "[SUCCESS]"),
    "warning": ("yellow", "[WARNING]"),
    "error": ("red", "[ERROR]"),
}


def presenter_message(palette: StylePalette, level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level)
    if template is None:
        return message
    color, tag = template
    return f"{palette.bold}{getattr(palette, color)}{tag}{palette.reset} {message}"


def header_block(palette: StylePalette, title: str) -> str:
    rule = "=" * 42
    return f"{palette.bold}{palette.cyan}{rule}\n      {title}       \n{rule}{palette.reset}"


def emphasis(palette: StylePalette, color: str, message: str) -> str:
    return f"{palette.bold}{getattr(palette, color)}{message}{palette.reset}"


def capability_flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT
