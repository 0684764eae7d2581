"""Logging utilities."""

from .output_log import OutputLog
from .utils import setup_file_logger

__all__ = ["OutputLog", "setup_file_logger"]
