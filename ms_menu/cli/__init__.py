from ms_menu.cli.main import app, main

__all__ = ["app", "main"]
