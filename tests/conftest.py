import pytest

from jsonspec.core.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    configure_logging(level="WARNING", json_logs=False)
