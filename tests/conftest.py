from typing import List, Tuple

import pytest

from formulizer.config import Settings
from formulizer.notifications import Severity


class RecordingNotifier:
    def __init__(self):
        self.alerts: List[Tuple[str, Severity, str]] = []

    async def alert(self, message, severity, title):
        self.alerts.append((message, Severity(severity), title))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def test_settings():
    return Settings(
        INSTANCE_URL="https://example.my.salesforce.com/",
        ACCESS_TOKEN="token-123",
        REQUEST_TIMEOUT=5.0,
        _env_file=None,
    )
