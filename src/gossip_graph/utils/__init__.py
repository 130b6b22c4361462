"""工具模块"""

from .helpers import load_text_file, load_text_lines, save_json_file, save_text_file
from .logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "load_text_file",
    "load_text_lines",
    "save_text_file",
    "save_json_file",
]
