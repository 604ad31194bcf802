"""Focus/outcome state machine shared by every strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ms_common.errors import UsageError
from ms_menu.core.models import KeyEvent, MenuResult, Option, Outcome


@dataclass
class MenuSession:
    """Transient state of one menu invocation.

    ``focus`` always lies in ``[0, len(options))``. Once ``outcome`` leaves
    None the session is terminal and ignores further events.
    """

    options: Sequence[Option]
    focus: int = 0
    outcome: Outcome | None = None

    def __post_init__(self) -> None:
        if not self.options:
            raise UsageError("No options provided")
        self.focus %= len(self.options)

    @property
    def count(self) -> int:
        return len(self.options)

    @property
    def done(self) -> bool:
        return self.outcome is not None

    def handle(self, event: KeyEvent) -> bool:
        """Apply one event; return True when the session reached a terminal state."""
        if self.done:
            return True
        if event is KeyEvent.UP:
            self.focus = (self.focus - 1 + self.count) % self.count
        elif event is KeyEvent.DOWN:
            self.focus = (self.focus + 1) % self.count
        elif event is KeyEvent.CONFIRM:
            self.outcome = Outcome.SELECTED
        elif event is KeyEvent.CANCEL:
            self.outcome = Outcome.CANCELLED
        return self.done

    def cancel(self) -> None:
        if not self.done:
            self.outcome = Outcome.CANCELLED

    def result(self) -> MenuResult:
        if self.outcome is Outcome.SELECTED:
            return MenuResult.selected(self.options, self.focus)
        return MenuResult.cancel()
