"""Pytest configuration and shared fixtures"""
import pytest
from flowise_config.app_settings import settings
from flowise_config.config.config_manager import FlowiseConfigManager, reset_config_manager


ADMIN_KEY = "test-admin-key"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from FLOWISE_* variables and any local .env file"""
    for name in ("FLOWISE_API_KEY", "FLOWISE_BASE_URL", "FLOWISE_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def manager():
    """Manager with a key and the default host"""
    return FlowiseConfigManager({"api_key": "secret"})


@pytest.fixture
def admin_key(monkeypatch):
    """Enable the config admin API with a known key"""
    monkeypatch.setattr(settings, "admin_api_key", ADMIN_KEY)
    return ADMIN_KEY


@pytest.fixture
def overrides_file(tmp_path):
    """YAML overrides file for the default manager"""
    path = tmp_path / "flowise.yaml"
    path.write_text(
        "base_url: https://flowise.internal\n"
        "timeout_ms: 10000\n"
        "caching_enabled: false\n"
    )
    return path
