# backend/pagecraft/utils/logging.py
import logging
import sys
from logging.handlers import RotatingFileHandler

from ..config import settings

LOG_DIR = settings.LOGS_PATH
LOG_DIR.mkdir(parents=True, exist_ok=True)

verbose_formatter = logging.Formatter(
    '\033[1;36m%(asctime)s\033[0m - \033[1;33m%(name)s\033[0m - \033[1;35m%(levelname)s\033[0m [\033[1;34m%(module)s:%(lineno)d\033[0m] - %(message)s'
)
file_formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s [%(module)s:%(lineno)d] - %(message)s'
)


class PagecraftLogger:
    """Logger wrapper that keeps `extra` keys from clobbering LogRecord attributes"""

    reserved_attrs = {
        'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
        'funcName', 'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'message', 'msg', 'name', 'pathname', 'process', 'processName',
        'relativeCreated', 'stack_info', 'thread', 'threadName', 'taskName'
    }

    def __init__(self, name: str):
        self.logger = logging.getLogger(f"pagecraft.{name}")
        self.logger.setLevel(settings.LOG_LEVEL)
        self.name = name
        self.setup_handlers()

    def setup_handlers(self):
        """Set up file and console handlers"""
        if self.logger.handlers:
            return

        file_handler = RotatingFileHandler(
            LOG_DIR / f"{self.name}.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(file_formatter)
        self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(verbose_formatter)
        self.logger.addHandler(console_handler)

    def _sanitize_extra(self, extra):
        if extra is None:
            return None

        return {
            (f"extra_{key}" if key in self.reserved_attrs else key): value
            for key, value in extra.items()
        }

    def _log(self, level, msg, extra=None, exc_info=None):
        # module:lineno of the caller
        self.logger.log(level, msg, extra=self._sanitize_extra(extra), exc_info=exc_info, stacklevel=3)

    def debug(self, msg, extra=None, exc_info=None):
        self._log(logging.DEBUG, msg, extra, exc_info)

    def info(self, msg, extra=None, exc_info=None):
        self._log(logging.INFO, msg, extra, exc_info)

    def warning(self, msg, extra=None, exc_info=None):
        self._log(logging.WARNING, msg, extra, exc_info)

    def error(self, msg, extra=None, exc_info=None):
        self._log(logging.ERROR, msg, extra, exc_info)

    def critical(self, msg, extra=None, exc_info=None):
        self._log(logging.CRITICAL, msg, extra, exc_info)


api_logger = PagecraftLogger("api")
store_logger = PagecraftLogger("store")
service_logger = PagecraftLogger("service")

__all__ = ["PagecraftLogger", "api_logger", "store_logger", "service_logger"]
