"""
Command-line interface for ms-menu.

Shows an interactive single-select menu and prints the chosen value, so
shell scripts can use ``choice=$(ms-menu select "Pick one:" a b c)``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import click
import typer
from typer.core import TyperGroup

from ms_common.api import ConfigurationError, configure_logging
from ms_menu.core.capabilities import describe
from ms_menu.core.models import EXIT_USAGE
from ms_menu.core.theme import capability_flag
from ms_menu.system.components.table import RichTablePresenter, TableModel
from ms_menu.system.facade import choose_strategy
from ms_menu.wiring.dependencies import MenuContext


class MenuCommandGroup(TyperGroup):
    """Reports bad arguments with the usage exit code instead of click's 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = EXIT_USAGE
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = EXIT_USAGE
            raise


app = typer.Typer(
    cls=MenuCommandGroup,
    help="Interactive single-select terminal menus that degrade gracefully.",
    no_args_is_help=True,
)


class StrategyChoice(str, Enum):
    auto = "auto"
    cursor = "cursor"
    clear = "clear"
    numbered = "numbered"


def _store(ctx: typer.Context) -> MenuContext:
    if not isinstance(ctx.obj, MenuContext):
        ctx.obj = MenuContext()
    return ctx.obj


def _fail_configuration(exc: ConfigurationError) -> None:
    typer.echo(f"[ERROR] {exc}", err=True)
    raise typer.Exit(exc.exit_code)


@app.callback()
def entry(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (defaults to MS_LOG_LEVEL or WARNING)."
    ),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON."),
) -> None:
    """Global entry point configuring logging and the shared context."""
    configure_logging(level=log_level, debug=debug, json=True if log_json else None, force=True)
    ctx.obj = MenuContext()


@app.command("select")
def select_command(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="Prompt shown above the options."),
    labels: Optional[List[str]] = typer.Argument(None, help="Option labels, in display order."),
    value: Optional[List[str]] = typer.Option(
        None,
        "--value",
        "-v",
        help="Return value for each label, in the same order (defaults to the label).",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the selected value to this file instead of stdout."
    ),
    strategy: Optional[StrategyChoice] = typer.Option(
        None, "--strategy", case_sensitive=False, help="Force a menu style when supported."
    ),
    no_echo: bool = typer.Option(False, "--no-echo", help="Do not print 'Selected: ...'."),
) -> None:
    """Show a menu; exit 0 on selection, 1 on usage error, 130 on cancel."""
    store = _store(ctx)
    store.strategy = strategy.value if strategy is not None else None
    store.echo_selection = False if no_echo else None
    try:
        selector = store.selector
    except ConfigurationError as exc:
        _fail_configuration(exc)

    result = selector.select(prompt, labels or [], value or None)
    if result.ok:
        if output is not None:
            output.write_text(f"{result.value}\n", encoding="utf-8")
        else:
            typer.echo(result.value)
    raise typer.Exit(result.exit_code)


@app.command("caps")
def caps_command(ctx: typer.Context) -> None:
    """Print the detected terminal capabilities and the menu style in use."""
    store = _store(ctx)
    try:
        settings = store.settings
    except ConfigurationError as exc:
        _fail_configuration(exc)
    caps = store.caps
    rows = [
        ["Interactive", capability_flag(caps.is_interactive)],
        ["ANSI color", capability_flag(caps.supports_ansi_color)],
        ["Cursor addressing", capability_flag(caps.supports_cursor_addressing)],
        ["Timed read", capability_flag(caps.supports_timed_read)],
        ["Raw input", capability_flag(caps.supports_raw_input)],
        ["Colors", str(caps.colors)],
        ["Platform", caps.platform.value],
        ["Host terminal", caps.host_terminal.value],
        ["Strategy", choose_strategy(caps, settings).value],
        ["Capabilities", describe(caps) or "-"],
    ]
    RichTablePresenter(store.console).show(
        TableModel(title="Terminal capabilities", columns=["Probe", "Result"], rows=rows)
    )


@app.command("demo")
def demo_command(ctx: typer.Context) -> None:
    """Walk through a couple of menus using the detected terminal."""
    store = _store(ctx)
    try:
        selector = store.selector
    except ConfigurationError as exc:
        _fail_configuration(exc)
    present = store.presenter

    present.header("Universal Menu Selector Test")
    present.info(f"Detected capabilities: {describe(store.caps) or 'none'}")
    present.info(f"Menu style: {selector.kind.value}")

    answer = selector.select("Do you want to continue?", [("Yes", "yes"), ("No", "no")])
    if not answer.ok:
        raise typer.Exit(answer.exit_code)
    present.success(f"You chose: {answer.value}")
    if answer.value == "no":
        return

    env = selector.select(
        "Select deployment environment:",
        ["🧪 Development", "🚦 Staging", "🚀 Production"],
        ["development", "staging", "production"],
    )
    if not env.ok:
        raise typer.Exit(env.exit_code)
    present.success(f"Environment: {env.value}")
    present.guide("Use `ms-menu select` in scripts to reuse these menus.")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
