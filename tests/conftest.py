import pytest

from logger import configure_logging


@pytest.fixture(autouse=True)
def _reset_shared_logger():
    configure_logging("WARN")
    yield
    configure_logging("WARN")
