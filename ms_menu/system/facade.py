from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import IO, Any, Sequence

from ms_common.errors import MSError, TerminalReadError, UsageError, error_to_payload
from ms_menu.core import capabilities
from ms_menu.core.capabilities import CapabilityDescriptor
from ms_menu.core.models import MenuResult, build_options
from ms_menu.core.protocols import MenuStrategy, Presenter, Terminal
from ms_menu.core.theme import StylePalette, resolve
from ms_menu.settings import MenuSettings
from ms_menu.system.components.presenter import PalettePresenter
from ms_menu.system.strategies import ClearScreenStrategy, CursorStrategy, NumberedStrategy
from ms_menu.system.terminal import PosixTerminal

logger = logging.getLogger(__name__)


class StrategyKind(str, Enum):
    CURSOR = "cursor"
    CLEAR = "clear"
    NUMBERED = "numbered"


_STRATEGIES: dict[StrategyKind, type[Any]] = {
    StrategyKind.CURSOR: CursorStrategy,
    StrategyKind.CLEAR: ClearScreenStrategy,
    StrategyKind.NUMBERED: NumberedStrategy,
}


def _supports(kind: StrategyKind, caps: CapabilityDescriptor) -> bool:
    if kind is StrategyKind.CURSOR:
        return (
            caps.is_interactive
            and caps.supports_raw_input
            and caps.supports_cursor_addressing
            and caps.supports_timed_read
            and not caps.is_legacy_host
        )
    if kind is StrategyKind.CLEAR:
        return caps.is_interactive and caps.supports_raw_input
    return True


def choose_strategy(
    caps: CapabilityDescriptor, settings: MenuSettings | None = None
) -> StrategyKind:
    """Pick the richest tier the terminal supports.

    A forced tier is honoured only when the terminal can run it; otherwise
    the choice degrades the same way auto detection does.
    """
    order = [StrategyKind.CURSOR, StrategyKind.CLEAR, StrategyKind.NUMBERED]
    requested = settings.strategy if settings is not None else "auto"
    if requested != "auto":
        order = order[order.index(StrategyKind(requested)):]
    for kind in order:
        if _supports(kind, caps):
            return kind
    return StrategyKind.NUMBERED


def build_strategy(
    kind: StrategyKind,
    terminal: Terminal,
    palette: StylePalette,
    settings: MenuSettings,
    *,
    enable_signals: bool = True,
) -> MenuStrategy:
    return _STRATEGIES[kind](
        terminal,
        palette,
        escape_timeout=settings.escape_timeout,
        enable_signals=enable_signals,
    )


class MenuSelector:
    """Runs menus against one terminal with capabilities detected once."""

    def __init__(
        self,
        *,
        output: IO[str] | None = None,
        input: IO[str] | None = None,
        error: IO[str] | None = None,
        settings: MenuSettings | None = None,
        caps: CapabilityDescriptor | None = None,
        terminal: Terminal | None = None,
        presenter: Presenter | None = None,
        enable_signals: bool = True,
    ) -> None:
        self.output = output if output is not None else sys.stdout
        self.input = input if input is not None else sys.stdin
        self.error = error if error is not None else sys.stderr
        self.settings = settings if settings is not None else MenuSettings.from_env()
        self.caps = caps if caps is not None else capabilities.detect(
            stdin=self.input, stdout=self.output
        )
        self.palette = resolve(self.caps, no_color=self.settings.no_color)
        self.terminal = terminal if terminal is not None else PosixTerminal(self.input, self.output)
        self.presenter = presenter if presenter is not None else PalettePresenter(
            self.error, self.palette
        )
        self.enable_signals = enable_signals
        self.kind = choose_strategy(self.caps, self.settings)

    def select(
        self,
        prompt: str,
        options: Sequence[Any],
        values: Sequence[str] | None = None,
    ) -> MenuResult:
        try:
            normalized = build_options(options, values)
        except UsageError as exc:
            logger.warning("menu usage error: %s", exc, extra=error_to_payload(exc))
            self.presenter.error(str(exc))
            return MenuResult.failure(exc)

        strategy = build_strategy(
            self.kind, self.terminal, self.palette, self.settings,
            enable_signals=self.enable_signals,
        )
        logger.debug("running %s menu with %d options", self.kind.value, len(normalized))
        try:
            result = strategy.run(prompt, normalized)
        except TerminalReadError as exc:
            logger.warning("menu aborted: %s", exc, extra=error_to_payload(exc))
            self.presenter.error(str(exc))
            return MenuResult.failure(exc)
        except MSError as exc:
            logger.warning("menu failed: %s", exc, extra=error_to_payload(exc))
            self.presenter.error(str(exc))
            return MenuResult.failure(exc)

        if result.cancelled:
            self.error.write("Selection cancelled\n")
            self.error.flush()
        elif self.settings.echo_selection:
            self.terminal.write(f"Selected: {result.label}\n")
            self.terminal.flush()
        return result


def select(
    prompt: str,
    options: Sequence[Any],
    *,
    values: Sequence[str] | None = None,
    **kwargs: Any,
) -> MenuResult:
    """Show a single-select menu and return the chosen value or a cancel/failure result.

    ``options`` holds Option objects, (label, value) pairs or plain labels;
    with plain labels and no ``values`` each label is its own value.
    Keyword arguments are passed to :class:`MenuSelector`.
    """
    return MenuSelector(**kwargs).select(prompt, options, values)
