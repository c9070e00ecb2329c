import logging
import sys
from logging.handlers import SysLogHandler

ROOT_LOGGER_NAME = "elasticbackup"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SYSLOG_FORMAT = "elasticbackup: [%(levelname)s] %(message)s"

_stream_handler: logging.Handler | None = None
_syslog_handler: logging.Handler | None = None


def _root_logger() -> logging.Logger:
    global _stream_handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _stream_handler is None:
        _stream_handler = logging.StreamHandler(sys.stderr)
        _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_stream_handler)
        root.setLevel(logging.INFO)
    return root


def setup_logger(name: str) -> logging.Logger:
    _root_logger()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO", syslog: bool = False, syslog_address: str = "/dev/log") -> None:
    """Apply the configured level and, when asked, mirror records to the local syslog."""
    global _syslog_handler
    root = _root_logger()
    root.setLevel(level.upper())
    if syslog and _syslog_handler is None:
        _syslog_handler = SysLogHandler(address=syslog_address, facility=SysLogHandler.LOG_USER)
        _syslog_handler.setFormatter(logging.Formatter(SYSLOG_FORMAT))
        root.addHandler(_syslog_handler)
