import pytest

from stringext.config import CONFIG


@pytest.fixture(autouse=True)
def restore_config():
    """Snapshot CONFIG so tests can tweak knobs freely."""
    saved = dict(CONFIG)
    yield CONFIG
    CONFIG.clear()
    CONFIG.update(saved)
