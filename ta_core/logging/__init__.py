"""
Logging configuration and utilities for the technical analysis engine.
"""
from .config import configure_logging, get_analysis_logger, get_logger, log_signal_decision

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "log_signal_decision"]
