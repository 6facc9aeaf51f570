"""Swift/iOS adapter: string literals, locales and .strings tables."""

import codecs
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..core.errors import ResourceParsingError
from ..core.models import LocaleReference
from .base import BaseAdapter
from .swift_printer import SwiftPrinter

_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\t': '\\t',
    '\r': '\\r',
    '\n': '\\n',
}

_UNESCAPES = {
    '"': '"',
    '\\': '\\',
    "'": "'",
    'n': '\n',
    't': '\t',
    'r': '\r',
    '0': '\0',
}

_ESCAPE_SEQUENCE = re.compile(r'\\(?:U([0-9a-fA-F]{4})|(.))', re.DOTALL)


def _resolve_escape(match) -> str:
    if match.group(1):
        return chr(int(match.group(1), 16))
    escaped = match.group(2)
    return _UNESCAPES.get(escaped, escaped)


def escape_string_literal(text: str) -> str:
    """
    Escape text for a Swift string literal.

    Every piece of external text (keys, values, file names) placed between
    double quotes in generated code goes through here.
    """
    return ''.join(_ESCAPES.get(char, char) for char in text)


def string_literal(text: str) -> str:
    return f'"{escape_string_literal(text)}"'


def string_array_literal(values: Iterable[str]) -> str:
    return '[' + ', '.join(string_literal(v) for v in values) + ']'


def comment_string(text: str) -> str:
    """Flatten text for a single ``///`` comment line."""
    return text.replace('\r', '').replace('\n', ' ')


def locale_code_string(locale: LocaleReference) -> str:
    """Swift expression for a LocaleReference (``nil``, ``.base``, ``.language("nl")``)."""
    if locale.is_none:
        return 'nil'
    if locale.is_base:
        return '.base'
    return f'.language({string_literal(locale.language)})'


def unescape_strings_value(value: str) -> str:
    """Resolve backslash escapes of a .strings key or value."""
    return _ESCAPE_SEQUENCE.sub(_resolve_escape, value)


class SwiftAdapter(BaseAdapter):
    """Adapter for Swift/iOS projects using .strings files."""

    # Pattern supports escaped characters: \" \\ \n etc.
    # (?:[^"\\]|\\.)* matches: non-quote/non-backslash chars OR backslash+any char
    _entry_pattern = re.compile(
        r'^\s*"((?:[^"\\]|\\.)+)"\s*=\s*"((?:[^"\\]|\\.)*)"\s*;',
        re.MULTILINE
    )

    def get_localization_file_extensions(self) -> List[str]:
        return ['.strings']

    def parse_localization_file(self, file_path: Path) -> Dict[str, str]:
        """
        Parse .strings file format.

        Format: "key" = "value";

        Note: Supports UTF-8 and UTF-16 (with BOM) files and escaped
        characters in keys and values (e.g., \\", \\\\, \\n, \\U00E9)
        """
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            raise ResourceParsingError(f"Strings file could not be read: {file_path} ({e.strerror})")

        try:
            if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
                content = data.decode('utf-16')
            else:
                content = data.decode('utf-8-sig')
        except UnicodeDecodeError:
            raise ResourceParsingError(f"Strings file is not valid UTF-8 or UTF-16: {file_path}")

        keys = {}
        for match in self._entry_pattern.finditer(content):
            key, value = match.groups()
            keys[unescape_strings_value(key)] = unescape_strings_value(value)

        return keys

    def extract_language_code(self, file_path: Path) -> Optional[str]:
        """
        Extract language code from .lproj directory.

        Example: /path/to/en.lproj/Localizable.strings -> en
        """
        lproj_dir = Path(file_path).parent
        if lproj_dir.name.endswith('.lproj'):
            return lproj_dir.name[:-len('.lproj')]
        return None

    def create_printer(self, access_level: str = 'internal'):
        return SwiftPrinter(access_level=access_level, tool_name=self.tool_name)
