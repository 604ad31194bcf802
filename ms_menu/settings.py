"""Menu settings resolved from the environment."""

from __future__ import annotations

import os
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ms_common.config.env import parse_bool_env
from ms_common.errors import ConfigurationError
from ms_menu.core.keys import DEFAULT_ESCAPE_TIMEOUT

StrategyName = Literal["auto", "cursor", "clear", "numbered"]

ENV_STRATEGY = "MS_MENU_STRATEGY"
ENV_ESCAPE_TIMEOUT = "MS_MENU_ESCAPE_TIMEOUT"
ENV_NO_COLOR = "MS_MENU_NO_COLOR"
ENV_ECHO_SELECTION = "MS_MENU_ECHO_SELECTION"


class MenuSettings(BaseModel):
    """Knobs for one selector; defaults reproduce the plain behaviour."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: StrategyName = "auto"
    escape_timeout: float = Field(default=DEFAULT_ESCAPE_TIMEOUT, gt=0, le=5)
    no_color: bool = False
    echo_selection: bool = True

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "MenuSettings":
        """Build settings from ``MS_MENU_*`` variables; explicit overrides win.

        ``NO_COLOR`` is honoured as well, following the no-color.org convention.
        """
        env = os.environ if env is None else env
        data: dict[str, Any] = {}
        if env.get(ENV_STRATEGY):
            data["strategy"] = env[ENV_STRATEGY].strip().lower()
        if env.get(ENV_ESCAPE_TIMEOUT):
            data["escape_timeout"] = env[ENV_ESCAPE_TIMEOUT].strip()
        no_color = parse_bool_env(env.get(ENV_NO_COLOR))
        if no_color is None and env.get("NO_COLOR"):
            no_color = True
        if no_color is not None:
            data["no_color"] = no_color
        echo = parse_bool_env(env.get(ENV_ECHO_SELECTION))
        if echo is not None:
            data["echo_selection"] = echo
        data.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid menu settings: {exc.errors()[0].get('msg', exc)}",
                context={"fields": [".".join(map(str, err["loc"])) for err in exc.errors()]},
                cause=exc,
            ) from exc
