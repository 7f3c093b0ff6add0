import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Each test runs in its own directory with no key configured
    monkeypatch.delenv("PHANTOM_PRIVATE_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    logger.remove()


@pytest.fixture
def wallet_path(tmp_path):
    return tmp_path / "Turbin3-wallet.json"
