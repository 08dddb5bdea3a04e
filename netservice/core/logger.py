import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict
from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "netservice"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s - method:%(method)s - endpoint:%(endpoint)s'
CONTEXT_FIELDS = ("method", "endpoint")

class _ContextFilter(logging.Filter):
    """Fill request context fields missing from a record"""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, '-')
        return True

class Logger:
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize logger with configuration"""
        self.config = config

        if LOGGER_NAME in self._loggers:
            self.logger = self._loggers[LOGGER_NAME]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(LOGGER_NAME)
            self._loggers[LOGGER_NAME] = self.logger

        self.logger.setLevel(self._get_log_level())
        self.formatter = logging.Formatter(self.config.get("logging.format") or LOG_FORMAT)
        self._filter = _ContextFilter()

        log_file = self.config.get("logging.file")
        if log_file:
            self._add_file_handler(Path(log_file))

        if self.config.get("logging.console_output", False):
            self._add_handler(logging.StreamHandler())

    def _add_handler(self, handler: logging.Handler) -> None:
        handler.setFormatter(self.formatter)
        # Module loggers propagate here, so defaults go on the handler
        handler.addFilter(self._filter)
        self.logger.addHandler(handler)

    def _add_file_handler(self, path: Path) -> None:
        if not path.parent.exists() and str(path.parent) != ".":
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise LoggerError(f"Cannot create log directory: {path.parent}") from e

        max_size = self.config.get("logging.max_size", 1024 * 1024)
        backup_count = self.config.get("logging.backup_count", 3)
        try:
            handler = RotatingFileHandler(
                str(path),
                maxBytes=max_size,
                backupCount=backup_count
            )
        except OSError as e:
            raise LoggerError(f"Failed to setup log file: {str(e)}") from e
        self._add_handler(handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level
