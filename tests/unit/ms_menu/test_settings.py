import pytest

from ms_common.errors import ConfigurationError
from ms_menu.settings import MenuSettings

pytestmark = pytest.mark.unit_ui


def test_defaults() -> None:
    settings = MenuSettings.from_env({})
    assert settings.strategy == "auto"
    assert settings.escape_timeout == pytest.approx(0.1)
    assert settings.no_color is False
    assert settings.echo_selection is True


def test_reads_environment() -> None:
    settings = MenuSettings.from_env(
        {
            "MS_MENU_STRATEGY": " Numbered ",
            "MS_MENU_ESCAPE_TIMEOUT": "0.25",
            "MS_MENU_NO_COLOR": "yes",
            "MS_MENU_ECHO_SELECTION": "0",
        }
    )
    assert settings.strategy == "numbered"
    assert settings.escape_timeout == pytest.approx(0.25)
    assert settings.no_color is True
    assert settings.echo_selection is False


def test_no_color_convention() -> None:
    assert MenuSettings.from_env({"NO_COLOR": "1"}).no_color is True
    assert MenuSettings.from_env({"NO_COLOR": ""}).no_color is False
    assert MenuSettings.from_env({"NO_COLOR": "1", "MS_MENU_NO_COLOR": "off"}).no_color is False


def test_overrides_win_and_none_is_ignored() -> None:
    settings = MenuSettings.from_env(
        {"MS_MENU_STRATEGY": "clear"}, strategy="cursor", echo_selection=None
    )
    assert settings.strategy == "cursor"
    assert settings.echo_selection is True


@pytest.mark.parametrize(
    "env",
    [
        {"MS_MENU_STRATEGY": "fancy"},
        {"MS_MENU_ESCAPE_TIMEOUT": "abc"},
        {"MS_MENU_ESCAPE_TIMEOUT": "0"},
        {"MS_MENU_ESCAPE_TIMEOUT": "60"},
    ],
)
def test_invalid_values_raise_configuration_error(env: dict) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        MenuSettings.from_env(env)
    assert str(exc_info.value).startswith("Invalid menu settings")
    assert exc_info.value.context["fields"]


def test_settings_are_frozen() -> None:
    settings = MenuSettings()
    with pytest.raises(Exception):
        settings.strategy = "clear"  # type: ignore[misc]
