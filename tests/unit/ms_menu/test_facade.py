import dataclasses
import io

import pytest

from ms_common.errors import UsageError
from ms_menu.api import (
    CapabilityDescriptor,
    HostTerminal,
    MenuSelector,
    MenuSettings,
    Option,
    Outcome,
    StrategyKind,
    choose_strategy,
    select,
)
from tests.helpers.terminal import ScriptedTerminal

pytestmark = pytest.mark.unit_ui

FULL = CapabilityDescriptor(
    is_interactive=True,
    supports_ansi_color=True,
    supports_cursor_addressing=True,
    supports_timed_read=True,
    supports_raw_input=True,
)
BASIC = CapabilityDescriptor(is_interactive=True, supports_raw_input=True)
PIPED = CapabilityDescriptor()


def test_choose_strategy_tiers() -> None:
    assert choose_strategy(FULL) is StrategyKind.CURSOR
    assert choose_strategy(BASIC) is StrategyKind.CLEAR
    assert choose_strategy(PIPED) is StrategyKind.NUMBERED


def test_choose_strategy_legacy_host_avoids_cursor() -> None:
    caps = dataclasses.replace(FULL, host_terminal=HostTerminal.APPLE_TERMINAL)
    assert choose_strategy(caps) is StrategyKind.CLEAR


def test_choose_strategy_requires_timed_read_for_cursor() -> None:
    caps = dataclasses.replace(FULL, supports_timed_read=False)
    assert choose_strategy(caps) is StrategyKind.CLEAR


def test_forced_strategy_degrades_when_unsupported() -> None:
    assert choose_strategy(FULL, MenuSettings(strategy="numbered")) is StrategyKind.NUMBERED
    assert choose_strategy(FULL, MenuSettings(strategy="clear")) is StrategyKind.CLEAR
    assert choose_strategy(PIPED, MenuSettings(strategy="cursor")) is StrategyKind.NUMBERED


def _selector(caps, terminal, **settings):
    error = io.StringIO()
    selector = MenuSelector(
        output=io.StringIO(),
        input=io.StringIO(),
        error=error,
        caps=caps,
        terminal=terminal,
        settings=MenuSettings(**settings),
        enable_signals=False,
    )
    return selector, error


def test_labels_without_values_return_label() -> None:
    terminal = ScriptedTerminal([b"\x1b[B", b"\r"])
    selector, _ = _selector(FULL, terminal)
    result = selector.select("Pick:", ["alpha", "beta", "gamma"])
    assert result.ok
    assert result.value == "beta"
    assert result.label == "beta"
    assert result.exit_code == 0
    assert terminal.output.endswith("Selected: beta\n")


def test_labels_with_values_return_value() -> None:
    terminal = ScriptedTerminal(lines=["3"])
    selector, _ = _selector(PIPED, terminal)
    result = selector.select("CPU:", ["250m (light)", "500m", "1000m (heavy)"], ["250m", "500m", "1000m"])
    assert result.value == "1000m"
    assert result.label == "1000m (heavy)"


def test_pairs_and_option_objects() -> None:
    terminal = ScriptedTerminal(lines=["1"])
    selector, _ = _selector(PIPED, terminal, echo_selection=False)
    result = selector.select("Pick:", [("Yes", "yes"), Option("No", "no")])
    assert result.value == "yes"
    assert "Selected:" not in terminal.output


@pytest.mark.parametrize("caps", [FULL, BASIC, PIPED])
def test_mismatched_values_is_usage_error_without_render(caps) -> None:
    terminal = ScriptedTerminal([b"\r"], lines=["1"])
    selector, error = _selector(caps, terminal)
    result = selector.select("Pick:", ["a", "b"], ["x"])
    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, UsageError)
    assert result.exit_code == 1
    assert terminal.written == []
    assert terminal.enter_calls == 0
    assert "Number of labels and values must match" in error.getvalue()


def test_usage_error_logs_error_payload(caplog: pytest.LogCaptureFixture) -> None:
    selector, _ = _selector(FULL, ScriptedTerminal())
    with caplog.at_level("WARNING", logger="ms_menu.system.facade"):
        selector.select("Pick:", ["a", "b"], ["x"])
    record = caplog.records[-1]
    assert record.error_type == "UsageError"
    assert record.error_context == {"labels": 2, "values": 1}


@pytest.mark.parametrize("caps", [FULL, BASIC, PIPED])
def test_empty_options_is_usage_error(caps) -> None:
    terminal = ScriptedTerminal()
    selector, error = _selector(caps, terminal)
    result = selector.select("Pick:", [])
    assert result.exit_code == 1
    assert terminal.written == []
    assert "No options provided" in error.getvalue()


@pytest.mark.parametrize(
    ("caps", "terminal"),
    [
        (FULL, ScriptedTerminal([b"q"])),
        (BASIC, ScriptedTerminal([b"q"])),
        (PIPED, ScriptedTerminal(lines=["q"])),
    ],
)
def test_cancel_restores_once_on_every_tier(caps, terminal) -> None:
    selector, error = _selector(caps, terminal)
    result = selector.select("Pick:", [("X", "x")])
    assert result.cancelled
    assert result.exit_code == 130
    assert terminal.restore_calls == 1
    assert error.getvalue() == "Selection cancelled\n"


def test_unreadable_terminal_is_failure_result() -> None:
    terminal = ScriptedTerminal()
    selector, error = _selector(FULL, terminal)
    result = selector.select("Pick:", ["a"])
    assert result.outcome is Outcome.FAILED
    assert result.exit_code == 1
    assert terminal.restore_calls == 1
    assert "Unexpected end of input" in error.getvalue()


def test_module_level_select_passes_options() -> None:
    terminal = ScriptedTerminal(lines=["2"])
    result = select(
        "Pick:",
        ["A", "B"],
        values=["a", "b"],
        output=io.StringIO(),
        input=io.StringIO(),
        error=io.StringIO(),
        caps=PIPED,
        terminal=terminal,
        settings=MenuSettings(),
        enable_signals=False,
    )
    assert result.value == "b"
