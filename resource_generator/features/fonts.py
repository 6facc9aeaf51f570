"""Typed accessors for custom fonts."""

from typing import Callable, Sequence

from ..core.code_model import RSWIFT_RESOURCES, Function, LetBinding, Struct, TypeReference
from ..core.grouping import group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import FontResource
from ..frameworks.swift import escape_string_literal, string_literal


def font_binding(font: FontResource) -> LetBinding:
    return LetBinding(
        name=sanitize(font.name),
        type_reference=TypeReference('FontResource', RSWIFT_RESOURCES),
        value_code=f".init(fontName: {string_literal(font.name)}, filename: {string_literal(font.filename)})",
        comments=(f"Font `{font.name}`.",),
    )


def font_validation(font: FontResource, tool_name: str) -> str:
    message = escape_string_literal(
        f"[{tool_name}] Font '{font.name}' could not be loaded, is '{font.filename}' "
        f"added to the UIAppFonts array in this targets Info.plist?"
    )
    return (
        f"if !{sanitize(font.name).value}.canBeLoaded() "
        f"{{ throw RswiftResources.ValidationError(\"{message}\") }}"
    )


def generate_font_struct(
    resources: Sequence[FontResource],
    prefix: SymbolName,
    warning: Callable[[str], None],
    tool_name: str = 'swift-resource-generator'
) -> Struct:
    """
    Build the ``font`` struct with a ``validate()`` that checks every font loads.

    Without fonts the struct is empty and left out by the caller.
    """
    struct_name = sanitize('font')
    qualified_name = prefix + struct_name

    grouped = group_by_identifier(resources, lambda f: f.name)
    grouped.report_warnings('font resource', 'font', warning)

    bindings = [font_binding(font) for font in grouped.items]

    members = list(bindings)
    if grouped.items:
        members.append(Function(
            name=sanitize('validate'),
            body='\n'.join(font_validation(font, tool_name) for font in grouped.items),
            throws=True,
        ))

    comments = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to {len(bindings)} fonts.",
    )
    return Struct(name=struct_name, members=tuple(members), comments=comments)
