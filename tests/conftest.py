import pytest

from math_parser import logging_system


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Each test starts from a fresh global logger at the default level"""
    logging_system._global_logger = None
    yield
    logging_system._global_logger = None
