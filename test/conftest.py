import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import logging

import pytest

from gridpath.utils.logger_config import SEARCH_LOGGER_NAME


@pytest.fixture
def restore_logging():
    """Undo the global handler changes made by setup_logging()."""
    root_logger = logging.getLogger()
    search_logger = logging.getLogger(SEARCH_LOGGER_NAME)
    root_handlers, root_level = list(root_logger.handlers), root_logger.level
    search_handlers, search_level = list(search_logger.handlers), search_logger.level
    search_propagate = search_logger.propagate
    yield
    for handler in set(root_logger.handlers + search_logger.handlers):
        if handler not in root_handlers and handler not in search_handlers:
            handler.close()
    root_logger.handlers[:] = root_handlers
    root_logger.setLevel(root_level)
    search_logger.handlers[:] = search_handlers
    search_logger.setLevel(search_level)
    search_logger.propagate = search_propagate
