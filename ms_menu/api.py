"""Public API surface for ms_menu."""

from ms_menu.core.capabilities import (
    CapabilityDescriptor,
    HostTerminal,
    Platform,
    describe,
    detect,
)
from ms_menu.core.models import KeyEvent, MenuResult, Option, Outcome, build_options
from ms_menu.core.theme import StylePalette, resolve
from ms_menu.settings import MenuSettings
from ms_menu.system.components.presenter import PalettePresenter
from ms_menu.system.facade import MenuSelector, StrategyKind, choose_strategy, select

__all__ = [
    "CapabilityDescriptor",
    "HostTerminal",
    "KeyEvent",
    "MenuResult",
    "MenuSelector",
    "MenuSettings",
    "Option",
    "Outcome",
    "PalettePresenter",
    "Platform",
    "StrategyKind",
    "StylePalette",
    "build_options",
    "choose_strategy",
    "describe",
    "detect",
    "resolve",
    "select",
]
