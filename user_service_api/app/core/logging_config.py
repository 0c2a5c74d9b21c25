"""
Logging set-up for the user service.

Every request is already logged once by ``RequestLoggingMiddleware``,
so uvicorn's own access log is lowered to ``WARNING`` unless asked
for; otherwise each request would appear twice.  The ``uvicorn`` and
``uvicorn.error`` loggers follow the configured level, so server
lifecycle messages and application messages are filtered alike.

Handlers are attached to the root logger under fixed names, which
makes ``setup_logging`` safe to call from every ``create_app`` while
still coexisting with handlers installed by other tools (pytest,
uvicorn's CLI).
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "user_service.console"
FILE_HANDLER = "user_service.file"

ACCESS_LOGGER = "uvicorn.access"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def _named_handler(handler: logging.Handler, name: str, formatter: logging.Formatter) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = False) -> None:
    """Configure logging for the service.

    Parameters
    ----------
    level : str
        Level name for the root and uvicorn server loggers (e.g.
        ``"DEBUG"``).  Case insensitive; unknown names mean ``INFO``.
    logfile : Optional[str]
        Also write log records to this file when given.
    access_log : bool
        Keep uvicorn's per-request access log at ``INFO``.  Off by
        default because the request middleware logs the same lines.

    The console handler is added once; later calls only adjust the
    access log and add the file handler if it is still missing.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.getLogger(ACCESS_LOGGER).setLevel(logging.INFO if access_log else logging.WARNING)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER):
        root.setLevel(numeric_level)
        for name in SERVER_LOGGERS:
            logging.getLogger(name).setLevel(numeric_level)
        root.addHandler(_named_handler(logging.StreamHandler(), CONSOLE_HANDLER, formatter))

    if logfile and not _has_handler(root, FILE_HANDLER):
        log_path = Path(logfile).resolve()
        root.addHandler(
            _named_handler(logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER, formatter)
        )
