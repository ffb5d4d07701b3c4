"""
password_toolbox package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ToolboxConfig, config_from_dict, config_from_yaml, load_config
from .generator import generate, generate_human_readable
from .matcher import contains_line, is_listed
from .picker import pick_line_of_length
from .sampler import Sampler, random_int, random_token
from .windowing import iter_windows, read_window
from .wordlist import WordlistHandle

__all__ = [
    "ToolboxConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Sampler",
    "random_int",
    "random_token",
    "read_window",
    "iter_windows",
    "WordlistHandle",
    "contains_line",
    "is_listed",
    "pick_line_of_length",
    "generate",
    "generate_human_readable",
]

__version__ = "0.1.0"
