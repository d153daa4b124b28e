import pytest
from pydantic import ValidationError

from passgen.config import Settings


def test_defaults(monkeypatch):
    for name in ("DEFAULT_LENGTH", "WINDOW_WIDTH", "WINDOW_HEIGHT", "CLIPBOARD_BACKEND", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)
    assert config.default_length == 5
    assert config.window_title == "Password Generator"
    assert (config.window_width, config.window_height) == (480, 360)
    assert config.clipboard_backend == "none"
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("default_length", "12")
    monkeypatch.setenv("CLIPBOARD_BACKEND", "pyperclip")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Settings(_env_file=None)
    assert config.default_length == 12
    assert config.clipboard_backend == "pyperclip"
    assert config.log_level == "DEBUG"


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("DEFAULT_LENGTH", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DEFAULT_LENGTH=20\nUNRELATED_SETTING=1\n", encoding="utf-8")

    config = Settings(_env_file=env_file)
    assert config.default_length == 20


@pytest.mark.parametrize(
    "overrides",
    [
        {"default_length": 101},
        {"default_length": -1},
        {"window_width": 0},
        {"window_height": -10},
        {"clipboard_backend": "xclip"},
        {"log_level": "VERBOSE"},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
