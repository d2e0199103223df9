"""
A small logger used across the pyboxscene package.

Writes to the console, to a file, or to both, each sink with its own
minimum level.
"""
import os
import sys
import time
from typing import Optional, Union
from enum import Enum, auto


class LogLevel(Enum):
    """Log levels for controlling verbosity."""
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    CRITICAL = auto()


def level_from_name(name: Union[str, LogLevel], default: LogLevel = LogLevel.INFO) -> LogLevel:
    """Resolve a level name such as 'debug' or 'WARNING' to a LogLevel."""
    if isinstance(name, LogLevel):
        return name
    return getattr(LogLevel, str(name).upper(), default)


class SceneLogger:
    """
    Configurable logger for the scene generator.

    Messages are prefixed with an optional timestamp, the level and the
    logger name.
    """
    def __init__(
        self,
        mode: str = 'console',
        log_file: Optional[str] = None,
        console_level: LogLevel = LogLevel.INFO,
        file_level: LogLevel = LogLevel.DEBUG,
        include_timestamp: bool = True,
        name: str = 'pyboxscene'
    ):
        """
        Args:
            mode: 'console', 'file', or 'both'
            log_file: Path to log file (required if mode is 'file' or 'both')
            console_level: Minimum log level for console output
            file_level: Minimum log level for file output
            include_timestamp: Whether to prefix messages with the wall time
            name: Name shown in every message
        """
        if mode not in ('console', 'file', 'both'):
            raise ValueError("mode must be 'console', 'file', or 'both'")
        if mode in ('file', 'both') and not log_file:
            raise ValueError("log_file must be provided when mode is 'file' or 'both'")

        self.mode = mode
        self.log_file = log_file
        self.console_level = console_level
        self.file_level = file_level
        self.include_timestamp = include_timestamp
        self.name = name

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            # Start every session with an empty file
            with open(self.log_file, 'w'):
                pass

    def set_level(self, level: Union[str, LogLevel]) -> None:
        """Set the console threshold (accepts a LogLevel or its name)."""
        self.console_level = level_from_name(level, self.console_level)

    def isEnabledFor(self, level: LogLevel) -> bool:
        """True when at least one sink would emit a message at `level`."""
        to_console = self.mode in ('console', 'both') and level.value >= self.console_level.value
        to_file = self.mode in ('file', 'both') and level.value >= self.file_level.value
        return to_console or to_file

    def _format_message(self, message: str, level: LogLevel) -> str:
        parts = []
        if self.include_timestamp:
            parts.append(f"[{time.strftime('%Y-%m-%d %H:%M:%S')}]")
        parts.append(f"[{level.name}]")
        if self.name:
            parts.append(f"[{self.name}]")
        return f"{' '.join(parts)} {message}"

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        """Log `message` at `level` to every sink whose threshold allows it."""
        if not self.isEnabledFor(level):
            return
        formatted = self._format_message(message, level)
        if self.mode in ('console', 'both') and level.value >= self.console_level.value:
            stream = sys.stderr if level.value >= LogLevel.WARNING.value else sys.stdout
            print(formatted, file=stream)
        if self.mode in ('file', 'both') and level.value >= self.file_level.value:
            with open(self.log_file, 'a') as f:
                f.write(formatted + '\n')

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    def critical(self, message: str) -> None:
        self.log(message, LogLevel.CRITICAL)

    def __call__(self, message: str, level: Union[str, LogLevel] = LogLevel.INFO) -> None:
        """Shorthand for `log`; `level` may be given by name."""
        self.log(message, level_from_name(level))


# Default logger instance
DEFAULT_LOGGER = SceneLogger(mode='console')


def get_logger(name: Optional[str] = None) -> SceneLogger:
    """
    Return the package-wide logger.

    Args:
        name: Ignored, accepted for parity with logging.getLogger
    """
    return DEFAULT_LOGGER


def set_logger(logger: Union[SceneLogger, None]) -> None:
    """
    Replace the package-wide logger.

    Args:
        logger: A SceneLogger instance, or None to restore a console logger
    """
    global DEFAULT_LOGGER
    if logger is None:
        DEFAULT_LOGGER = SceneLogger(mode='console')
    elif not isinstance(logger, SceneLogger):
        raise ValueError("Logger must be an instance of SceneLogger")
    else:
        DEFAULT_LOGGER = logger
