"""Utility modules."""

from .colors import Colors
from .config import Config, create_default_config
from .validators import is_valid_language_code, is_valid_module_name, parse_generator_list

__all__ = [
    'Colors',
    'Config',
    'create_default_config',
    'is_valid_language_code',
    'is_valid_module_name',
    'parse_generator_list',
]
