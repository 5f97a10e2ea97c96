"""Tests for picker configuration."""

from xcpick.config import REFRESH_SCRIPT, PickerConfig, PickerTheme


def test_defaults():
    config = PickerConfig()
    assert config.program_name == "xc"
    assert config.theme == PickerTheme()
    assert config.strict_history is False
    assert config.sync_history is True


def test_default_refresh_command_uses_bundled_script():
    command = PickerConfig().resolved_refresh_command()
    assert command == ["zsh", str(REFRESH_SCRIPT)]
    assert REFRESH_SCRIPT.exists()


def test_from_env_empty():
    assert PickerConfig.from_env({}) == PickerConfig()


def test_from_env_reads_variables():
    config = PickerConfig.from_env({
        "NO_COLOR": "",
        "XCPICK_STRICT_HISTORY": "Yes",
        "XCPICK_REFRESH_COMMAND": "zsh -i -c 'fc -R'",
    })
    assert config.no_color is True
    assert config.strict_history is True
    assert config.resolved_refresh_command() == ["zsh", "-i", "-c", "fc -R"]


def test_from_env_strict_history_false_values():
    assert PickerConfig.from_env({"XCPICK_STRICT_HISTORY": "0"}).strict_history is False


def test_overrides_take_precedence():
    config = PickerConfig.from_env({"NO_COLOR": "1"}, no_color=False, program_name="mk")
    assert config.no_color is False
    assert config.program_name == "mk"
