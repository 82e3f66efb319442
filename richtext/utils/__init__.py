"""Utility helpers."""

from .logger import NOTICE, setup_logger, silent_logger

__all__ = ["NOTICE", "setup_logger", "silent_logger"]
