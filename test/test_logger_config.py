#!/usr/bin/env python3
"""
Logging setup and the search-loop logger adapter
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import Mock


from gridpath.utils.logger_config import (
    SEARCH_LOGGER_NAME,
    SearchLoggerAdapter,
    SearchLoopFormatter,
    get_search_logger,
    setup_logging,
)


def make_record(**extra):
    record = logging.LogRecord("search", logging.DEBUG, __file__, 1, "next node %s", ((1, 2),), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_prefixes_loop_count():
    assert SearchLoopFormatter().format(make_record(loop=7)) == "[loop 7] next node (1, 2)"


def test_formatter_falls_back_to_level_name():
    assert SearchLoopFormatter().format(make_record()) == "[DEBUG] next node (1, 2)"


def test_adapter_injects_current_loop_count():
    finder = Mock(loop_count=3)
    adapter = get_search_logger(finder)
    assert isinstance(adapter, SearchLoggerAdapter)
    assert adapter.logger.name == SEARCH_LOGGER_NAME

    _, kwargs = adapter.process("msg", {})
    assert kwargs["extra"] == {"loop": 3}
    finder.loop_count = 4
    _, kwargs = adapter.process("msg", {})
    assert kwargs["extra"] == {"loop": 4}


def test_setup_logging_console_only(restore_logging):
    setup_logging(logging.WARNING)

    root_logger = logging.getLogger()
    assert len(root_logger.handlers) == 1
    assert root_logger.handlers[0].level == logging.WARNING

    search_logger = logging.getLogger(SEARCH_LOGGER_NAME)
    assert not search_logger.propagate
    assert isinstance(search_logger.handlers[0].formatter, SearchLoopFormatter)


def test_setup_logging_writes_rotating_file(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    setup_logging(logging.INFO, log_dir=str(log_dir))

    file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0] in logging.getLogger(SEARCH_LOGGER_NAME).handlers

    logging.getLogger("gridpath.test").info("written to file")
    file_handlers[0].flush()
    assert "written to file" in (log_dir / "pathfinder.log").read_text()


def test_search_loop_records_carry_loop_count(restore_logging):
    from gridpath.pathfinding import PathFinder

    records = []
    handler = logging.Handler(logging.DEBUG)
    handler.emit = records.append
    search_logger = logging.getLogger(SEARCH_LOGGER_NAME)
    search_logger.addHandler(handler)
    search_logger.setLevel(logging.DEBUG)

    finder = PathFinder(4, 4)
    finder.load_map([[True] * 4 for _ in range(4)])
    finder.set_start(0, 0)
    finder.set_destination(3, 3)
    finder.find_path()

    assert records
    assert [record.loop for record in records] == list(range(1, len(records) + 1))
