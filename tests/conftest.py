"""
Pytest configuration and fixtures

Settings are cached process-wide by get_settings(); every test starts and
ends with a fresh cache so environment overrides never leak between tests.
"""
import pytest

from bmicalc_app.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for var in ("APP_NAME", "DEBUG", "LOG_LEVEL", "LOG_SINK"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def normal_result():
    """Evaluation for 70kg / 1.75m"""
    from bmicalc_app.services.evaluator import evaluate
    return evaluate(70, 1.75)
