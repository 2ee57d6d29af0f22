# backend/projecthub/utils/logging.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from ..config import settings

# Ensure logs directory exists
LOG_DIR = settings.STORAGE_PATH / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)

verbose_formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s [%(module)s:%(lineno)d] - %(message)s'
)


class ProjectHubLogger:
    """Logger wrapper that keeps caller-supplied extras away from reserved LogRecord attributes"""

    reserved_attrs = {
        'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
        'funcName', 'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'message', 'msg', 'name', 'pathname', 'process', 'processName',
        'relativeCreated', 'stack_info', 'thread', 'threadName', 'taskName'
    }

    def __init__(self, name: str):
        self.logger = logging.getLogger(f"projecthub.{name}")
        self.logger.setLevel(settings.LOG_LEVEL.upper())
        self.setup_handlers()

    def setup_handlers(self):
        """Set up file and console handlers"""
        if self.logger.handlers:
            return

        file_handler = RotatingFileHandler(
            LOG_DIR / f"{self.logger.name}.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(verbose_formatter)
        self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(verbose_formatter)
        self.logger.addHandler(console_handler)

    def _sanitize_extra(self, extra):
        if extra is None:
            return None

        sanitized = {}
        for key, value in extra.items():
            if key in self.reserved_attrs:
                sanitized[f"extra_{key}"] = value
            else:
                sanitized[key] = value
        return sanitized

    def debug(self, msg, extra=None, exc_info=None):
        self.logger.debug(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)

    def info(self, msg, extra=None, exc_info=None):
        self.logger.info(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)

    def warning(self, msg, extra=None, exc_info=None):
        self.logger.warning(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)

    def error(self, msg, extra=None, exc_info=None):
        self.logger.error(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)


# Loggers for the different layers
api_logger = ProjectHubLogger("api")
db_logger = ProjectHubLogger("database")
service_logger = ProjectHubLogger("service")

__all__ = ["ProjectHubLogger", "api_logger", "db_logger", "service_logger"]
