# third-party
import pytest
from loguru import logger

# local
from pol2cart import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Ignore any user config file and start each test with an empty cache."""
    monkeypatch.setattr(config, 'CACHE', {})
    monkeypatch.setattr(config, 'get_user_path',
                        lambda pkg='pol2cart': tmp_path / 'user' / 'config.yaml')


@pytest.fixture(autouse=True)
def silent_logger():
    yield
    # undo `--verbose`
    logger.remove()
    logger.disable('pol2cart')
