from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ms_menu.core import theme


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]


def build_rich_table(
    model: TableModel,
    *,
    border_style: str = theme.RICH_BORDER_STYLE,
    header_style: str = theme.RICH_ACCENT_BOLD,
    title_style: str = theme.RICH_ACCENT_BOLD,
    box_style: box.Box = box.ROUNDED,
) -> Table:
    rich_table = Table(
        title=Text.from_markup(model.title),
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )
    for column in model.columns:
        rich_table.add_column(column, no_wrap=True)
    for row in model.rows:
        rich_table.add_row(*[Text.from_markup(str(cell)) for cell in row])
    return rich_table


class RichTablePresenter:
    def __init__(self, console: Console) -> None:
        self._console = console

    def show(self, table: TableModel) -> None:
        self._console.print(build_rich_table(table))
