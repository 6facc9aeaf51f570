"""printf-style format specifier parsing and cross-locale unification."""

import re
from typing import Dict, List, Optional, Sequence

from ..core.models import FormatParam, FormatSpecifier

# %%, or %[position$][flags][width][.precision][length]conversion
_FORMAT_PATTERN = re.compile(
    r'%(?:%|(?:(?P<position>\d+)\$)?[-+ #0\']*(?:\d+|\*)?(?:\.(?:\d+|\*))?'
    r'(?:hh|h|ll|l|L|q|t|z|j)?(?P<conversion>[@dDiuUxXoOfFeEgGaAcCsSp]))'
)

_CONVERSIONS = {
    '@': FormatSpecifier.STRING,
    'd': FormatSpecifier.INT,
    'D': FormatSpecifier.INT,
    'i': FormatSpecifier.INT,
    'u': FormatSpecifier.UNSIGNED_INT,
    'U': FormatSpecifier.UNSIGNED_INT,
    'x': FormatSpecifier.UNSIGNED_INT,
    'X': FormatSpecifier.UNSIGNED_INT,
    'o': FormatSpecifier.UNSIGNED_INT,
    'O': FormatSpecifier.UNSIGNED_INT,
    'f': FormatSpecifier.FLOAT,
    'F': FormatSpecifier.FLOAT,
    'e': FormatSpecifier.FLOAT,
    'E': FormatSpecifier.FLOAT,
    'g': FormatSpecifier.FLOAT,
    'G': FormatSpecifier.FLOAT,
    'a': FormatSpecifier.FLOAT,
    'A': FormatSpecifier.FLOAT,
    'c': FormatSpecifier.CHAR,
    'C': FormatSpecifier.CHAR,
    's': FormatSpecifier.CVARARGS_OBJECT,
    'S': FormatSpecifier.CVARARGS_OBJECT,
    'p': FormatSpecifier.CVARARGS_OBJECT,
}

SPECIFIER_NAMES = {
    'string': FormatSpecifier.STRING,
    'int': FormatSpecifier.INT,
    'uint': FormatSpecifier.UNSIGNED_INT,
    'float': FormatSpecifier.FLOAT,
    'double': FormatSpecifier.FLOAT,
    'char': FormatSpecifier.CHAR,
    'object': FormatSpecifier.CVARARGS_OBJECT,
    'any': FormatSpecifier.TOP_TYPE,
}


def parse_format_params(value: str) -> List[FormatParam]:
    """
    Parse the format parameters of a localized value.

    Positional (``%2$@``) and sequential specifiers can be mixed, ``%%`` is
    a literal percent sign. A position that is never referenced, or that is
    referenced with two different types, becomes ``TOP_TYPE``.

    Examples:
        parse_format_params('Hello %@')      -> [String]
        parse_format_params('%2$d of %1$@')  -> [String, Int]
        parse_format_params('%2$@')          -> [Any, String]

    Args:
        value: Localized string

    Returns:
        One FormatParam per position
    """
    by_position: Dict[int, FormatSpecifier] = {}
    next_position = 1

    for match in _FORMAT_PATTERN.finditer(value):
        conversion = match.group('conversion')
        if conversion is None:
            continue

        if match.group('position'):
            position = int(match.group('position'))
        else:
            position = next_position
            next_position += 1

        spec = _CONVERSIONS[conversion]
        existing = by_position.get(position)
        if existing is not None and existing != spec:
            spec = FormatSpecifier.TOP_TYPE
        by_position[position] = spec

    if not by_position:
        return []

    return [
        FormatParam(spec=by_position.get(position, FormatSpecifier.TOP_TYPE))
        for position in range(1, max(by_position) + 1)
    ]


def has_unresolved_params(params: Sequence[FormatParam]) -> bool:
    """True when a position is missing or ambiguous within one locale."""
    return any(param.spec == FormatSpecifier.TOP_TYPE for param in params)


def unify_specifier(a: FormatSpecifier, b: FormatSpecifier) -> Optional[FormatSpecifier]:
    """Equal specifiers unify, a concrete one wins over ``TOP_TYPE``."""
    if a == b:
        return a
    if a == FormatSpecifier.TOP_TYPE:
        return b
    if b == FormatSpecifier.TOP_TYPE:
        return a
    return None


def unify_params(
    existing: Sequence[FormatParam],
    incoming: Sequence[FormatParam]
) -> Optional[List[FormatParam]]:
    """
    Unify two parameter signatures index by index.

    Fails (returns None) when the lengths differ, two named parameters at
    one index have different names, or the specifiers are incompatible.
    """
    if len(existing) != len(incoming):
        return None

    result = []
    for current, other in zip(existing, incoming):
        if current.name is not None and other.name is not None and current.name != other.name:
            return None

        spec = unify_specifier(current.spec, other.spec)
        if spec is None:
            return None

        result.append(FormatParam(spec=spec, name=current.name or other.name))

    return result


def unify_all(signatures: Sequence[Sequence[FormatParam]]) -> Optional[List[FormatParam]]:
    """Fold signatures pairwise, seeded with the first one."""
    if not signatures:
        return []

    unified: Optional[List[FormatParam]] = list(signatures[0])
    for signature in signatures[1:]:
        unified = unify_params(unified, signature)
        if unified is None:
            return None

    return unified
