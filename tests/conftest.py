"""Configuração do pytest para o projeto notify-relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path, root_path / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config.settings import (  # noqa: E402
    get_alchemy_settings,
    get_base_settings,
    get_pubsub_settings,
)


def _clear_settings_cache() -> None:
    get_alchemy_settings.cache_clear()
    get_base_settings.cache_clear()
    get_pubsub_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Garante que settings sejam relidas do ambiente em cada teste."""
    _clear_settings_cache()
    yield
    _clear_settings_cache()


@pytest.fixture
def relay_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Ambiente mínimo válido para subir o relay."""
    env = {
        "API_KEY": "test-signing-key",
        "GCP_PROJECT": "test-project",
        "DEAD_TOPIC": "publisher-dead",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("API_KEY_SECRET_ID", raising=False)
    monkeypatch.delenv("SIGNATURE_HEADER", raising=False)
    return env
