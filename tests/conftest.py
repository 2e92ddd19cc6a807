"""
Pytest fixtures for receipt_scanner tests.
"""

import pytest

from receipt_scanner.config import ExtractorConfig, get_config
from receipt_scanner.extractor import ReceiptFieldExtractor


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated unit tests")


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Keep the cached settings from leaking between tests."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config() -> ExtractorConfig:
    return ExtractorConfig(nearness_threshold=3.0)


@pytest.fixture
def extractor(config: ExtractorConfig) -> ReceiptFieldExtractor:
    return ReceiptFieldExtractor(config)
