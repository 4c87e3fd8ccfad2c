"""
Global logger for gpu_device_info.

Every module logs through a GlobalLogger obtained from get_logger(). All
loggers delegate to one process-wide handler, so a host tool (profiler,
compiler driver) can route catalog diagnostics into its own output by
installing a handler once.

Usage:
    from gpu_device_info.utils.print_utils import get_logger, set_global_handler

    logger = get_logger(__name__)
    logger.debug("Indexed %d records", 42)

    # Route every catalog message somewhere else
    set_global_handler(my_handler)
"""

import sys
import threading
from datetime import datetime
from typing import Any, Callable, Optional


LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _format_message(message: Any, *args) -> str:
    if args:
        try:
            return message % args
        except (TypeError, ValueError):
            return f"{message} {' '.join(map(str, args))}"
    return str(message)


class GlobalLoggerManager:
    """
    Holds the handler shared by every logger and the minimum level to emit.

    Debug output is off by default: lookups run on hot paths of the tools
    that embed the catalog.
    """

    def __init__(self):
        self._global_handler: Optional[Callable] = None
        self._lock = threading.Lock()
        self._min_level = "INFO"

        self.set_handler(self._default_handler)

    def _default_handler(self, level: str, name: str, message: str, *args, **kwargs):
        formatted_message = _format_message(message, *args)

        color_codes = {
            "DEBUG": "\033[36m",  # Cyan
            "INFO": "\033[32m",  # Green
            "WARNING": "\033[33m",  # Yellow
            "ERROR": "\033[31m",  # Red
            "CRITICAL": "\033[35m",  # Magenta
        }
        reset_code = "\033[0m"

        use_colors = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        if use_colors and level in color_codes:
            level_str = f"{color_codes[level]}{level}{reset_code}"
        else:
            level_str = level

        # Format: [LEVEL] [MODULE] MESSAGE, continuation lines aligned
        header = f"[{level_str}] [{name}] "
        whitespace = " " * len(header)
        message_lines = formatted_message.split("\n")
        aligned_message = "\n".join(
            [message_lines[0]] + [f"{whitespace}{line}" for line in message_lines[1:]]
        )

        print(f"{header}{aligned_message}", file=sys.stderr)

    def set_handler(self, handler: Callable[..., None]):
        """
        Set the handler used by all loggers.

        Args:
            handler: A function taking (level, module_name, message, *args, **kwargs)
        """
        with self._lock:
            self._global_handler = handler

    def get_handler(self) -> Optional[Callable]:
        with self._lock:
            return self._global_handler

    def set_level(self, level: str):
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{level}'. Supported: {list(LEVELS)}")
        with self._lock:
            self._min_level = level

    def get_level(self) -> str:
        with self._lock:
            return self._min_level

    def is_enabled_for(self, level: str) -> bool:
        return LEVELS.index(level) >= LEVELS.index(self.get_level())


_global_manager = GlobalLoggerManager()


class GlobalLogger:
    """
    A named logger that delegates to the global handler.

    Provides the standard levels (debug, info, warning, error, critical).
    Messages below the global level are dropped before formatting.
    """

    def __init__(self, name: str):
        self.name = name

    def _log(self, level: str, message: Any, *args, **kwargs):
        if not _global_manager.is_enabled_for(level):
            return
        handler = _global_manager.get_handler()
        if handler:
            handler(level, self.name, message, *args, **kwargs)

    def debug(self, message: Any, *args, **kwargs):
        self._log("DEBUG", message, *args, **kwargs)

    def info(self, message: Any, *args, **kwargs):
        self._log("INFO", message, *args, **kwargs)

    def warning(self, message: Any, *args, **kwargs):
        self._log("WARNING", message, *args, **kwargs)

    def warn(self, message: Any, *args, **kwargs):
        """Alias for warning."""
        self.warning(message, *args, **kwargs)

    def error(self, message: Any, *args, **kwargs):
        self._log("ERROR", message, *args, **kwargs)

    def critical(self, message: Any, *args, **kwargs):
        self._log("CRITICAL", message, *args, **kwargs)


def get_logger(name: str = __name__) -> GlobalLogger:
    """
    Get a logger instance for the given module name.

    Args:
        name: The name of the module/logger (typically __name__)

    Returns:
        A GlobalLogger instance
    """
    return GlobalLogger(name)


def set_global_handler(handler: Callable[..., None]):
    """
    Set a global handler that will be used by all logger instances.

    Args:
        handler: A function that takes (level, module_name, message, *args, **kwargs)

    Example:
        def collect(level, module_name, message, *args, **kwargs):
            messages.append((level, message % args if args else message))

        set_global_handler(collect)
    """
    _global_manager.set_handler(handler)


def get_global_handler() -> Optional[Callable]:
    """Get the current global handler function."""
    return _global_manager.get_handler()


def set_log_level(level: str):
    """Set the minimum level emitted by every logger ("DEBUG" ... "CRITICAL")."""
    _global_manager.set_level(level)


def get_log_level() -> str:
    return _global_manager.get_level()


def reset_to_default_handler():
    """Reset the global handler to the default stderr handler."""
    _global_manager.set_handler(_global_manager._default_handler)


def create_file_handler(filename: str) -> Callable:
    """
    Create a handler that appends log lines to a file.

    Args:
        filename: Path to the log file

    Returns:
        A handler function that can be used with set_global_handler
    """

    def file_handler(level: str, name: str, message: str, *args, **kwargs):
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        log_line = f"[{timestamp}] [{level}] [{name}] {_format_message(message, *args)}\n"

        with open(filename, "a", encoding="utf-8") as f:
            f.write(log_line)

    return file_handler


def create_combined_handler(*handlers: Callable) -> Callable:
    """
    Create a handler that calls multiple handlers in order.

    Args:
        *handlers: Multiple handler functions

    Returns:
        A combined handler function
    """

    def combined_handler(level: str, name: str, message: str, *args, **kwargs):
        for handler in handlers:
            handler(level, name, message, *args, **kwargs)

    return combined_handler


__all__ = [
    "get_logger",
    "set_global_handler",
    "get_global_handler",
    "set_log_level",
    "get_log_level",
    "reset_to_default_handler",
    "create_file_handler",
    "create_combined_handler",
    "GlobalLogger",
]
