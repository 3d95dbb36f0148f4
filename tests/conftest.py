import os
import sys

import pytest
from loguru import logger

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def debug_log():
    """Collect the package's DEBUG messages for the duration of a test."""
    messages = []
    sink_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG",
                         filter="string_dist")
    logger.enable("string_dist")
    try:
        yield messages
    finally:
        logger.disable("string_dist")
        logger.remove(sink_id)
