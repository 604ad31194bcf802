"""Interactive single-select terminal menu.

Provides a capability-graded picker so callers get arrow-key navigation on
capable terminals and a numbered prompt everywhere else.
"""

from ms_menu.api import MenuResult, Option, select

__all__ = ["MenuResult", "Option", "select"]
