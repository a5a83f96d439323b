"""Configuration and logging utilities."""
from .config import Config, MetricsConfig
from .logger import SignalLogger, log_timing, setup_logging, setup_logging_from_config

__all__ = ["Config", "MetricsConfig", "SignalLogger", "log_timing", "setup_logging", "setup_logging_from_config"]
