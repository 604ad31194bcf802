from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO, Optional

from rich.console import Console

from ms_menu.core import capabilities
from ms_menu.core.capabilities import CapabilityDescriptor
from ms_menu.core.protocols import Presenter
from ms_menu.core.theme import StylePalette, resolve
from ms_menu.settings import MenuSettings
from ms_menu.system.components.presenter import PalettePresenter
from ms_menu.system.facade import MenuSelector


@dataclass
class MenuContext:
    """Container for CLI services, initialized lazily.

    Menus render on ``error`` so that ``output`` carries only the result.
    """

    output: IO[str] = field(default_factory=lambda: sys.stdout)
    error: IO[str] = field(default_factory=lambda: sys.stderr)
    input: IO[str] = field(default_factory=lambda: sys.stdin)
    strategy: Optional[str] = None
    echo_selection: Optional[bool] = None

    _settings: Optional[MenuSettings] = None
    _caps: Optional[CapabilityDescriptor] = None
    _selector: Optional[MenuSelector] = None
    _presenter: Optional[Presenter] = None
    _console: Optional[Console] = None

    @property
    def settings(self) -> MenuSettings:
        if self._settings is None:
            self._settings = MenuSettings.from_env(
                strategy=self.strategy, echo_selection=self.echo_selection
            )
        return self._settings

    @settings.setter
    def settings(self, value: MenuSettings) -> None:
        self._settings = value

    @property
    def caps(self) -> CapabilityDescriptor:
        if self._caps is None:
            self._caps = capabilities.detect(stdin=self.input, stdout=self.error)
        return self._caps

    @caps.setter
    def caps(self, value: CapabilityDescriptor) -> None:
        self._caps = value

    @property
    def palette(self) -> StylePalette:
        return resolve(self.caps, no_color=self.settings.no_color)

    @property
    def selector(self) -> MenuSelector:
        if self._selector is None:
            self._selector = MenuSelector(
                output=self.error,
                input=self.input,
                error=self.error,
                settings=self.settings,
                caps=self.caps,
                presenter=self.presenter,
            )
        return self._selector

    @selector.setter
    def selector(self, value: MenuSelector) -> None:
        self._selector = value

    @property
    def presenter(self) -> Presenter:
        if self._presenter is None:
            self._presenter = PalettePresenter(self.error, self.palette)
        return self._presenter

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console(file=self.output, no_color=self.settings.no_color)
        return self._console


__all__ = ["MenuContext"]
