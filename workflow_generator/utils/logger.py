# workflow_generator/utils/logger.py

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# server loggers that should print exactly like ours
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# HTTP client stack under the Gemini call; per-request chatter stays at WARNING+
CLIENT_LOGGERS = ("openai", "httpx", "httpcore")


def resolve_level(level: Union[str, int, None]) -> int:
    """
    "debug", "INFO", 10 ... -> logging level number. Anything unknown is INFO.
    """
    if isinstance(level, int):
        return level
    found = logging.getLevelName(str(level or "").upper())
    return found if isinstance(found, int) else logging.INFO


def init_logger(level: Union[str, int] = "INFO") -> logging.Handler:
    """
    One stdout handler for the root logger and uvicorn, generator logs at
    `level`, client libraries no chattier than WARNING.
    Calling it again replaces the handler instead of stacking a second one.
    """
    log_level = resolve_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [handler]

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.propagate = False
        server_logger.setLevel(log_level)

    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    return handler
