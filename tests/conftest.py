import pytest
import structlog


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Keep structlog configuration and CONSTATS_* variables test-local."""
    for name in ("CONSTATS_LOG_LEVEL", "CONSTATS_SAMPLE_SIZE", "CONSTATS_SEED"):
        monkeypatch.delenv(name, raising=False)
    yield
    structlog.reset_defaults()
