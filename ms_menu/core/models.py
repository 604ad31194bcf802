from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from ms_common.errors import MSError, UsageError


@dataclass(frozen=True)
class Option:
    label: str
    value: str


class KeyEvent(str, Enum):
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    OTHER = "other"


class Outcome(str, Enum):
    SELECTED = "selected"
    CANCELLED = "cancelled"
    FAILED = "failed"


EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CANCELLED = 130


@dataclass(frozen=True)
class MenuResult:
    """Outcome of one menu invocation."""

    outcome: Outcome
    index: int | None = None
    value: str | None = None
    label: str | None = None
    error: MSError | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SELECTED

    @property
    def cancelled(self) -> bool:
        return self.outcome is Outcome.CANCELLED

    @property
    def exit_code(self) -> int:
        if self.outcome is Outcome.SELECTED:
            return EXIT_OK
        if self.outcome is Outcome.CANCELLED:
            return EXIT_CANCELLED
        return self.error.exit_code if self.error is not None else EXIT_USAGE

    @classmethod
    def selected(cls, options: Sequence[Option], index: int) -> "MenuResult":
        option = options[index]
        return cls(Outcome.SELECTED, index=index, value=option.value, label=option.label)

    @classmethod
    def cancel(cls) -> "MenuResult":
        return cls(Outcome.CANCELLED)

    @classmethod
    def failure(cls, error: MSError) -> "MenuResult":
        return cls(Outcome.FAILED, error=error)


def build_options(
    options: Sequence[Any],
    values: Sequence[str] | None = None,
) -> list[Option]:
    """Normalise caller input into a non-empty list of Options.

    ``options`` may hold Option instances, (label, value) pairs or plain
    labels. Plain labels take their value from ``values`` when supplied,
    otherwise the label itself is the value.
    """
    if not options:
        raise UsageError("No options provided")

    labels: list[str] = []
    paired: list[str | None] = []
    for item in options:
        if isinstance(item, Option):
            labels.append(item.label)
            paired.append(item.value)
        elif isinstance(item, tuple) and len(item) == 2:
            labels.append(str(item[0]))
            paired.append(str(item[1]))
        else:
            labels.append(str(item))
            paired.append(None)

    if values is not None and len(values) > 0:
        if any(value is not None for value in paired):
            raise UsageError("Explicit values cannot be combined with (label, value) pairs")
        if len(values) != len(labels):
            raise UsageError(
                "Number of labels and values must match",
                context={"labels": len(labels), "values": len(values)},
            )
        paired = [str(value) for value in values]

    return [
        Option(label=label, value=label if value is None else value)
        for label, value in zip(labels, paired)
    ]
