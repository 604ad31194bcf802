from ms_menu.wiring.dependencies import MenuContext

__all__ = ["MenuContext"]
