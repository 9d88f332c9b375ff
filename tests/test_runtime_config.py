from __future__ import annotations

import pytest

from textdoc.runtime import RuntimeSettings


def test_settings_defaults_from_empty_environment() -> None:
    settings = RuntimeSettings.from_env({})

    assert settings == RuntimeSettings()
    assert settings.logger_name == "textdoc"
    assert settings.log_level == "INFO"
    assert settings.console is True


def test_settings_read_prefixed_variables() -> None:
    settings = RuntimeSettings.from_env(
        {
            "TEXTDOC_LOGGER": "lsp",
            "TEXTDOC_LOG_LEVEL": "debug",
            "TEXTDOC_LOG_FILE": "/tmp/textdoc.log",
            "TEXTDOC_DISABLE_CONSOLE": "yes",
            "TEXTDOC_NO_COLOR": "1",
            "TEXTDOC_LOG_JSON": "on",
            "TEXTDOC_LOG_BUFFERED": "true",
            "TEXTDOC_LOG_BUFFER_SIZE": "512",
        }
    )

    assert settings.logger_name == "lsp"
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "/tmp/textdoc.log"
    assert settings.console is False
    assert settings.colored is False
    assert settings.json_format is True
    assert settings.buffered is True
    assert settings.buffer_size == 512


def test_settings_reject_bad_buffer_size_when_buffered() -> None:
    with pytest.raises(ValueError):
        RuntimeSettings.from_env(
            {"TEXTDOC_LOG_BUFFERED": "1", "TEXTDOC_LOG_BUFFER_SIZE": "lots"}
        )
    with pytest.raises(ValueError):
        RuntimeSettings.from_env(
            {"TEXTDOC_LOG_BUFFERED": "1", "TEXTDOC_LOG_BUFFER_SIZE": "0"}
        )


def test_buffer_size_ignored_when_unbuffered() -> None:
    settings = RuntimeSettings.from_env({"TEXTDOC_LOG_BUFFER_SIZE": "lots"})

    assert settings.buffered is False
    assert settings.buffer_size == 2048
