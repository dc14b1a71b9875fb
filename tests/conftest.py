import pytest
from ssllabs.core import config

_SETTING_NAMES = (
    "SSLLABS_BASE_URL",
    "SSLLABS_MAX_ATTEMPTS",
    "SSLLABS_INITIAL_DELAY_MS",
    "SSLLABS_RETRY_DELAY_MS",
    "USE_MOCK",
    "REQUEST_TIMEOUT",
    "USER_AGENT",
)

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment: no mock by default and no real waiting"""
    # Store original values
    original = {name: getattr(config.settings, name) for name in _SETTING_NAMES}

    config.settings.USE_MOCK = False
    config.settings.SSLLABS_INITIAL_DELAY_MS = 0
    config.settings.SSLLABS_RETRY_DELAY_MS = 0

    yield

    # Restore original values
    for name, value in original.items():
        setattr(config.settings, name, value)


class FakeSleep:
    """Records requested delays instead of waiting"""

    def __init__(self):
        self.calls = []

    async def __call__(self, ms):
        self.calls.append(ms)


class LogCollector:
    def __init__(self):
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def log_collector():
    return LogCollector()
