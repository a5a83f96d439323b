"""
Logging setup and timing helpers.
"""

import os
import logging
import logging.handlers
import time
from collections import deque
from functools import wraps


def setup_logging(level="INFO", log_file=None, max_size_mb=10, backup_count=3, name="handsignals"):
    """Attach console (and optional rotating file) handlers to the package logger.

    Only the ``name`` logger is configured; the root logger and any
    handlers the host application installed are left alone. Calling this
    again replaces the handlers from the previous call.
    """
    console_format = "%(asctime)s  %(levelname)-5s  %(message)s"
    file_format = "%(asctime)s [%(levelname)-7s] %(name)-25s | %(message)s"
    date_format = "%H:%M:%S"

    package_logger = logging.getLogger(name)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(console_format, datefmt=date_format))
    package_logger.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        package_logger.addHandler(file_handler)

    return package_logger


def setup_logging_from_config(config):
    """Apply the ``logging`` section (level, file) of a loaded Config."""
    return setup_logging(
        level=config.get("logging.level", "INFO"),
        log_file=config.get("logging.file"),
    )


class SignalLogger:
    """Logs per-frame hand signals and keeps a bounded history of them."""

    def __init__(self, max_history=300):
        self.logger = logging.getLogger("handsignals.signals")
        self._history = deque(maxlen=max_history)

    def log_frame(self, hand_id, frame_id, metrics, latency_ms=None):
        """Record one evaluated frame of a hand's metrics."""
        entry = {
            "timestamp": time.time(),
            "hand_id": hand_id,
            "frame_id": frame_id,
            "fist": metrics.fist,
            "grasp": metrics.grasp,
            "latency_ms": latency_ms,
        }
        self._history.append(entry)
        self.logger.debug(
            "Hand: %-8s | Frame: %6d | Fist: %.2f | Grasp: %.2f | Latency: %s",
            hand_id,
            frame_id,
            metrics.fist,
            metrics.grasp,
            f"{latency_ms:.2f}ms" if latency_ms is not None else "N/A",
        )

    def get_history(self, last_n=None):
        """Get recent frame entries, oldest first."""
        history = list(self._history)
        if last_n:
            return history[-last_n:]
        return history

    @property
    def total_frames(self):
        return len(self._history)


def log_timing(func):
    """Decorator to log function execution time at DEBUG."""
    logger = logging.getLogger(func.__module__)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if not logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = (time.perf_counter() - start) * 1000
        logger.debug("%s took %.2fms", func.__name__, elapsed)
        return result

    return wrapper
