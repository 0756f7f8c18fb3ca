"""
Utility modules for the content pipeline.

This package provides centralized utilities for:
- JSON file I/O and atomic directory replacement
- Logging setup
"""

from .file_io import dumps_json, read_json, write_json_atomic, write_text_atomic, replace_directory
from .logging import setup_logging

__all__ = [
    # File operations
    "dumps_json",
    "read_json",
    "write_json_atomic",
    "write_text_atomic",
    "replace_directory",
    # Logging
    "setup_logging",
]
