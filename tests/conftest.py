from __future__ import annotations

import pytest

from errorpages.config import get_settings
from tests.helpers import RecordingSend


@pytest.fixture
def recording_send() -> RecordingSend:
    return RecordingSend()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
