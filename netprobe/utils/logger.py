"""Centralized logging for netprobe.

Simple, explicit logging that requires configuration before use.

Usage:
    from netprobe.utils.logger import Logger

    # Configure once at startup (required before any logging)
    Logger.configure(level="INFO", output="stderr", color=True)

    # Get a logger anywhere in the codebase
    log = Logger.get("backends.network")
    log.info("Enumerating interfaces...")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

import click

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


# Foreground colour per level, applied at the sink.
LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "blue",
    logging.INFO: "white",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ColorFormatter(logging.Formatter):
    """Formatter that wraps each rendered record in its level colour."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return message
        bold = True if record.levelno >= logging.CRITICAL else None
        return click.style(message, fg=color, bold=bold)


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for netprobe.

    Must be configured once before use. Attempting to log before configuration
    raises LoggerNotConfiguredError.

    Example:
        >>> # At application startup
        >>> Logger.configure(level="WARNING", output="stderr")
        >>>
        >>> # Anywhere in the codebase
        >>> log = Logger.get("backends.reachability")
        >>> log.warning("Probe timed out")
    """

    _configured: bool = False
    _root_name: str = "netprobe"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
        include_location: bool = False,
        color: bool = False,
        format_string: str | None = None,
    ) -> None:
        """Configure the logger. Must be called before any logging.

        Args:
            level: Log level - "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
                or a LogLevel enum value.
            output: Where to send logs:
                - None: stdout (default)
                - "stderr": sys.stderr
                - str/Path: File path
                - TextIO: Any file-like object
            timestamps: Include timestamps in messages (default True).
            include_location: Include [filename:lineno] [funcName] (default False).
            color: Colour records by level. Only honoured when the sink is a TTY.
            format_string: Custom format string (overrides timestamps/include_location).

        Example:
            >>> Logger.configure(level="DEBUG", timestamps=True)
            >>> Logger.configure(level="INFO", output="netprobe.log")
            >>> Logger.configure(level="WARNING", output=sys.stderr, color=True)
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        stream: TextIO | None = None
        if output is None:
            stream = sys.stdout
        elif output == "stderr":
            stream = sys.stderr
        elif isinstance(output, str | Path):
            new_handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            stream = output
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        if stream is not None:
            new_handler = logging.StreamHandler(stream)

        new_handler.setLevel(level.to_logging_level())

        if format_string is None:
            parts = []
            if timestamps:
                parts.append("%(asctime)s")
            parts.append("%(levelname)s")
            parts.append("[%(name)s]")
            if include_location:
                parts.append("[%(filename)s:%(lineno)d] [%(funcName)s]")
            parts.append("%(message)s")
            format_string = " ".join(parts)

        use_color = color and stream is not None and _is_tty(stream)
        formatter_cls = ColorFormatter if use_color else logging.Formatter
        new_handler.setFormatter(formatter_cls(format_string, datefmt=TIME_FORMAT))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "netprobe."). If None, returns root logger.

        Returns:
            Logger instance.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured

    @classmethod
    def ensure_configured(cls) -> None:
        """Configure with quiet stderr defaults if nothing configured yet.

        Library entry points call this so they can be used without the CLI.
        """
        if not cls._configured:
            cls.configure(level="WARNING", output="stderr")


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
