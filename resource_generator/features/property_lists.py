"""Typed constants for Info.plist and entitlements values."""

import logging
import math
from typing import Any, Callable, List, Mapping, Optional, Sequence

from ..core.code_model import (
    BOOL,
    DOUBLE,
    INIT_BUNDLE,
    INT,
    STRING,
    STRING_ARRAY,
    LetBinding,
    Struct,
)
from ..core.grouping import group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import PropertyListResource
from ..frameworks.swift import string_array_literal, string_literal

logger = logging.getLogger(__name__)


def scalar_binding(name: SymbolName, key: str, value: Any) -> Optional[LetBinding]:
    """Typed let binding for a plist scalar, None for unsupported values."""
    comments = (f"Key `{key}`.",)

    if isinstance(value, bool):
        return LetBinding(name, 'true' if value else 'false', BOOL, comments)
    if isinstance(value, int):
        return LetBinding(name, str(value), INT, comments)
    if isinstance(value, float):
        if math.isnan(value):
            return LetBinding(name, 'Double.nan', DOUBLE, comments)
        if math.isinf(value):
            return LetBinding(name, 'Double.infinity' if value > 0 else '-Double.infinity', DOUBLE, comments)
        return LetBinding(name, repr(value), DOUBLE, comments)
    if isinstance(value, str):
        return LetBinding(name, string_literal(value), STRING, comments)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return LetBinding(name, string_array_literal(value), STRING_ARRAY, comments)
    return None


class PropertyListGenerator:
    """
    Build a struct of property list values.

    Values are read from every build configuration; only keys whose value
    is the same in all configurations are generated. Dictionaries become
    nested structs.

    Args:
        resource_name: Struct name, 'info' or 'entitlements'
        bundle_style: Nested structs hold a bundle and are reached through
            getters; otherwise they are constants reached through lets
        warning: Warning sink
    """

    def __init__(self, resource_name: str, bundle_style: bool, warning: Callable[[str], None]):
        self.resource_name = resource_name
        self.bundle_style = bundle_style
        self.warning = warning

    def generate_struct(self, plists: Sequence[PropertyListResource], prefix: SymbolName) -> Struct:
        struct_name = sanitize(self.resource_name)
        if not plists:
            return Struct(name=struct_name, members=(INIT_BUNDLE,) if self.bundle_style else ())

        struct = self._struct(struct_name, [p.contents for p in plists], prefix, self.resource_name)
        qualified_name = prefix + struct_name
        scalars = [m for m in struct.members if isinstance(m, LetBinding) and m.type_reference is not None]
        comment = (
            f"This `{qualified_name.value}` struct is generated, and contains static references "
            f"to {len(scalars) + len(struct.structs)} properties."
        )
        return Struct(name=struct.name, members=struct.members, comments=(comment,))

    def _struct(
        self,
        name: SymbolName,
        contents: List[Mapping[str, Any]],
        prefix: SymbolName,
        location: str
    ) -> Struct:
        qualified_name = prefix + name

        shared_keys = [key for key in contents[0] if all(key in c for c in contents[1:])]
        grouped = group_by_identifier(shared_keys, str)
        grouped.report_warnings('property list key', 'key', self.warning, container=f"in {location}")

        members: List = [INIT_BUNDLE] if self.bundle_style else []
        for symbol, key in grouped.uniques:
            values = [c[key] for c in contents]

            if all(isinstance(v, Mapping) for v in values):
                nested = self._struct(symbol, values, qualified_name, f"{location}.{key}")
                if nested.is_empty:
                    continue
                nested = Struct(name=nested.name, members=nested.members, comments=(f"Key `{key}`.",))
                members.append(nested.bundle_var_getter() if self.bundle_style else nested.let_binding())
                members.append(nested)
                continue

            if any(v != values[0] for v in values[1:]):
                logger.debug("Skipping %s key '%s', value differs per build configuration", location, key)
                continue

            binding = scalar_binding(symbol, key, values[0])
            if binding is None:
                logger.debug("Skipping %s key '%s', unsupported value type %s", location, key, type(values[0]).__name__)
                continue
            members.append(binding)

        return Struct(name=name, members=tuple(members))
