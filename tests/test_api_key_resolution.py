from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import HandlerConfig, resolve_api_key


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GOOGLE_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.setenv("FIRST_KEY", "   ")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "FIRST_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_returns_empty_when_nothing_is_set(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert resolve_api_key("", "GOOGLE_API_KEY") == ""


def test_handler_config_reads_google_api_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    config = HandlerConfig.from_env()
    assert config.api_key == "google-value"
    assert config.available is True


def test_handler_config_ignores_other_key_names(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-value")
    config = HandlerConfig.from_env()
    assert config.available is False
