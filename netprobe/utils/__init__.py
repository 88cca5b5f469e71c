"""netprobe utilities - logging and environment helpers."""

from netprobe.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from netprobe.utils.logger import (
    ColorFormatter,
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    "ColorFormatter",
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
