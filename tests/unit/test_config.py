"""
tests/unit/test_config.py

Unit tests for config.py.
"""

from __future__ import annotations

from cloudflare_ddns_helper.config import Settings, load_settings


def test_load_settings_defaults():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.api_base == "https://api.cloudflare.com/client/v4"
    assert settings.timeout == 30.0
    assert settings.log_file is None
    assert settings.syslog is False


def test_load_settings_reads_environment():
    settings = load_settings(
        {
            "CLOUDFLARE_API_BASE": "https://cf.internal/client/v4",
            "CLOUDFLARE_DDNS_TIMEOUT": "12.5",
            "CLOUDFLARE_DDNS_LOG_FILE": "/tmp/ddns.log",
            "CLOUDFLARE_DDNS_SYSLOG": "1",
        }
    )

    assert settings.api_base == "https://cf.internal/client/v4"
    assert settings.timeout == 12.5
    assert settings.log_file == "/tmp/ddns.log"
    assert settings.syslog is True


def test_invalid_timeout_falls_back_to_default(caplog):
    settings = load_settings({"CLOUDFLARE_DDNS_TIMEOUT": "soon"})

    assert settings.timeout == 30.0
    assert "CLOUDFLARE_DDNS_TIMEOUT" in caplog.text


def test_non_positive_timeout_falls_back_to_default():
    assert load_settings({"CLOUDFLARE_DDNS_TIMEOUT": "0"}).timeout == 30.0


def test_load_settings_uses_os_environ(monkeypatch):
    monkeypatch.setenv("CLOUDFLARE_DDNS_SYSLOG", "1")
    assert load_settings().syslog is True
