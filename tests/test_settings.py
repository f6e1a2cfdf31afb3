from __future__ import annotations

import pytest

from brokerconsole import INT32_MAX, FilterSettings, SettingsError
from brokerconsole.messaging import BODY_PREFIX, CUSTOM_PREFIX, HEADER_PREFIX


def test_defaults_match_console_output(monkeypatch):
    for name in (
        "BROKERCONSOLE_HEADER_PREFIX",
        "BROKERCONSOLE_CUSTOM_PREFIX",
        "BROKERCONSOLE_BODY_PREFIX",
        "BROKERCONSOLE_BYTES_CHUNK_SIZE",
        "BROKERCONSOLE_BYTES_RENDERING",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = FilterSettings.from_env()

    assert settings == FilterSettings()
    assert settings.header_prefix == HEADER_PREFIX
    assert settings.custom_prefix == CUSTOM_PREFIX
    assert settings.body_prefix == BODY_PREFIX
    assert settings.bytes_chunk_size == INT32_MAX
    assert settings.bytes_rendering == "text"


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("BROKERCONSOLE_HEADER_PREFIX", "H:")
    monkeypatch.setenv("BROKERCONSOLE_BYTES_CHUNK_SIZE", "1024")
    monkeypatch.setenv("BROKERCONSOLE_BYTES_RENDERING", " Base64 ")

    settings = FilterSettings.from_env()

    assert settings.header_prefix == "H:"
    assert settings.bytes_chunk_size == 1024
    assert settings.bytes_rendering == "base64"


def test_from_env_rejects_non_integer_chunk_size(monkeypatch):
    monkeypatch.setenv("BROKERCONSOLE_BYTES_CHUNK_SIZE", "big")

    with pytest.raises(SettingsError, match="must be an integer"):
        FilterSettings.from_env()


def test_invalid_settings_raise():
    with pytest.raises(SettingsError, match="bytes_chunk_size"):
        FilterSettings(bytes_chunk_size=0)
    with pytest.raises(SettingsError, match="Unknown bytes_rendering"):
        FilterSettings(bytes_rendering="hex")
