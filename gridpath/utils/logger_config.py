import logging
import os
from logging.handlers import RotatingFileHandler

SEARCH_LOGGER_NAME = 'search'


class SearchLoopFormatter(logging.Formatter):
    """
    A compact formatter for search-loop records.
    It formats logs as '[loop N] message'.
    """
    def format(self, record):
        """Overrides the default format method."""
        # Records coming through SearchLoggerAdapter carry the loop counter
        if hasattr(record, 'loop'):
            message = f"[loop {record.loop}] {record.getMessage()}"
        else:
            message = f"[{record.levelname}] {record.getMessage()}"
        return message


def setup_logging(log_level=logging.INFO, log_dir=None):
    """
    Set up logging for the pathfinder tools.

    This configures two logging streams:
    1. The root logger for general messages (map loading, results, CLI),
       which logs to the console and, when `log_dir` is given, to
       `pathfinder.log`.
    2. A dedicated 'search' logger for per-iteration records of the A* loop,
       which uses the compact `SearchLoopFormatter`. It does not propagate,
       so a DEBUG console level is needed to see the loop trace.

    Args:
        log_level (int): The logging level for the console handlers.
        log_dir (str): Optional directory for rotating log files.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    root_logger.addHandler(console_handler)

    search_logger = logging.getLogger(SEARCH_LOGGER_NAME)
    search_logger.setLevel(logging.DEBUG)
    search_logger.propagate = False
    search_logger.handlers.clear()

    search_console_handler = logging.StreamHandler()
    search_console_handler.setLevel(log_level)
    search_console_handler.setFormatter(SearchLoopFormatter())
    search_logger.addHandler(search_console_handler)

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        log_file = os.path.join(log_dir, 'pathfinder.log')
        file_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=3)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root_logger.addHandler(file_handler)
        search_logger.addHandler(file_handler)


class SearchLoggerAdapter(logging.LoggerAdapter):
    """
    A logger adapter that injects the finder's current loop count into records.
    """
    def process(self, msg, kwargs):
        if 'finder' in self.extra:
            kwargs['extra'] = {'loop': self.extra['finder'].loop_count}
        return msg, kwargs


def get_search_logger(finder, name=SEARCH_LOGGER_NAME):
    """
    Get a logger adapter for search-loop events of `finder`.

    Args:
        finder: The PathFinder whose `loop_count` is reported.
        name (str): The name of the logger.

    Returns:
        SearchLoggerAdapter: A logger adapter instance.
    """
    logger = logging.getLogger(name)
    return SearchLoggerAdapter(logger, {'finder': finder})
