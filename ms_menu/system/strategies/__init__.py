from ms_menu.system.strategies.base import RawKeyStrategy
from ms_menu.system.strategies.clear_screen import ClearScreenStrategy
from ms_menu.system.strategies.cursor import CursorStrategy
from ms_menu.system.strategies.numbered import NumberedStrategy

__all__ = ["ClearScreenStrategy", "CursorStrategy", "NumberedStrategy", "RawKeyStrategy"]
