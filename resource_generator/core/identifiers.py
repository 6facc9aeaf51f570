"""Conversion of arbitrary resource names into valid Swift identifiers."""

import re
import unicodedata
from dataclasses import dataclass


SWIFT_KEYWORDS = frozenset([
    # Declarations
    'associatedtype', 'class', 'deinit', 'enum', 'extension', 'fileprivate',
    'func', 'import', 'init', 'inout', 'internal', 'let', 'open', 'operator',
    'private', 'protocol', 'public', 'rethrows', 'static', 'struct',
    'subscript', 'typealias', 'var',
    # Statements
    'break', 'case', 'catch', 'continue', 'default', 'defer', 'do', 'else',
    'fallthrough', 'for', 'guard', 'if', 'in', 'repeat', 'return', 'throw',
    'switch', 'where', 'while',
    # Expressions and types
    'Any', 'as', 'await', 'false', 'is', 'nil', 'self', 'Self', 'super',
    'throws', 'true', 'try', 'Type', 'Protocol',
    # Wildcard
    '_',
])

# Emoji are legal in Swift identifiers even though Unicode files them as symbols
_EMOJI_RANGES = (
    (0x1F300, 0x1FAFF),
    (0x2600, 0x27BF),
    (0x1F1E6, 0x1F1FF),
)

_BLACKLISTED_CATEGORIES = ('Z', 'P', 'S', 'C')

_LEADING_DIGITS = re.compile(r'^\d+')


def _is_emoji(char: str) -> bool:
    code = ord(char)
    return any(start <= code <= end for start, end in _EMOJI_RANGES)


def _is_blacklisted(char: str) -> bool:
    if char == '_' or _is_emoji(char):
        return False
    return unicodedata.category(char)[0] in _BLACKLISTED_CATEGORIES


def _split_components(name: str):
    components = []
    current = []
    for char in name:
        if _is_blacklisted(char):
            components.append(''.join(current))
            current = []
        else:
            current.append(char)
    components.append(''.join(current))
    return components


def _uppercase_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _lowercase_first(text: str) -> str:
    return text[:1].lower() + text[1:]


@dataclass(frozen=True)
class SymbolName:
    """
    A sanitized Swift identifier.

    Attributes:
        raw: Identifier without keyword escaping (``class``)
    """
    raw: str

    @property
    def value(self) -> str:
        """Identifier as it appears in source, keywords wrapped in backticks."""
        if self.raw in SWIFT_KEYWORDS:
            return f"`{self.raw}`"
        return self.raw

    @property
    def is_empty(self) -> bool:
        return not self.raw

    def __add__(self, other: 'SymbolName') -> 'SymbolName':
        """Qualify a nested name: ``_R + image`` is ``_R.image``."""
        return SymbolName(f"{self.value}.{other.value}")

    def __lt__(self, other: 'SymbolName') -> bool:
        return self.value < other.value

    def __str__(self):
        return self.value


def sanitize(raw: str, lowercase_leading: bool = True) -> SymbolName:
    """
    Convert an arbitrary name into a Swift identifier.

    Characters that cannot appear in an identifier split the name into
    components that are joined in camel case, leading digits are dropped and
    the first character is lowercased, unless the whole name is uppercase.

    Examples:
        sanitize('icon-add.png')  -> iconAddPng
        sanitize('2x_Logo')       -> x_Logo
        sanitize('URL')           -> URL
        sanitize('class').value   -> `class`

    Args:
        raw: Any name, e.g. a file name or a localization key
        lowercase_leading: Lowercase the first character

    Returns:
        SymbolName, empty when nothing usable remains
    """
    components = _split_components(raw)
    cleaned = components[0] + ''.join(_uppercase_first(c) for c in components[1:])
    cleaned = _LEADING_DIGITS.sub('', cleaned)

    if lowercase_leading and not cleaned.isupper():
        cleaned = _lowercase_first(cleaned)

    return SymbolName(cleaned)
