"""Validation utilities."""

import re

from ..core.identifiers import SWIFT_KEYWORDS

_LANGUAGE_CODE = re.compile(r'^[a-z]{2,3}(-[A-Za-z]{2,4})?(-[A-Z]{2})?$')
_MODULE_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def is_valid_language_code(code: str) -> bool:
    """
    Validate a development language code.

    Examples: en, nl, pt-BR, zh-Hans, zh-Hans-CN, Base
    """
    if not code or not isinstance(code, str):
        return False
    if code == 'Base':
        return True
    return bool(_LANGUAGE_CODE.match(code))


def is_valid_module_name(name: str) -> bool:
    """
    Validate a Swift module name for an import statement.

    Examples:
        is_valid_module_name('UIKit')      -> True
        is_valid_module_name('My-Module')  -> False
        is_valid_module_name('class')      -> False
    """
    if not name or not isinstance(name, str):
        return False
    return bool(_MODULE_NAME.match(name)) and name not in SWIFT_KEYWORDS


def parse_generator_list(value: str) -> list:
    """Split a comma separated generator list, ``'image, font'`` -> ``['image', 'font']``."""
    return [part.strip() for part in value.split(',') if part.strip()]
