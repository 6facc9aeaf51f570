"""Typed reuse identifiers of table and collection view cells."""

from typing import Callable, Sequence

from ..core.code_model import RSWIFT_RESOURCES, LetBinding, Struct, TypeReference
from ..core.grouping import group_by, group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import NibResource, Reusable, StoryboardResource
from ..frameworks.swift import string_literal


def _type_name(reference: TypeReference) -> str:
    return f"{reference.module}.{reference.name}" if reference.module else reference.name


def reusable_binding(reusable: Reusable) -> LetBinding:
    return LetBinding(
        name=sanitize(reusable.identifier),
        type_reference=TypeReference('ReuseIdentifier', RSWIFT_RESOURCES, (reusable.type,)),
        value_code=f".init(identifier: {string_literal(reusable.identifier)})",
        comments=(f"Reuse identifier `{reusable.identifier}`.",),
    )


def generate_reuse_identifier_struct(
    nibs: Sequence[NibResource],
    storyboards: Sequence[StoryboardResource],
    prefix: SymbolName,
    warning: Callable[[str], None]
) -> Struct:
    """
    Build the ``reuseIdentifier`` struct from the reusables of nibs and storyboards.

    The same identifier and type declared in several files (for example a
    localized copy of a nib) is generated once.
    """
    struct_name = sanitize('reuseIdentifier')
    qualified_name = prefix + struct_name

    reusables = [r for nib in nibs for r in nib.reusables]
    reusables += [r for storyboard in storyboards for r in storyboard.reusables]
    unique = list(dict.fromkeys(reusables))

    grouped = group_by_identifier(unique, lambda r: r.identifier)
    grouped.report_warnings('reuseIdentifier', 'reuseIdentifier', warning)

    for identifier, variants in group_by(unique, lambda r: r.identifier).items():
        if len(variants) > 1:
            types = sorted(_type_name(r.type) for r in variants)
            warning(
                f"Reuse identifier '{identifier}' is used for different types ({', '.join(types)}), "
                f"generating it for {_type_name(variants[0].type)}"
            )

    bindings = tuple(reusable_binding(r) for r in grouped.items)
    comments = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to {len(bindings)} reuse identifiers.",
    )
    return Struct(name=struct_name, members=bindings, comments=comments)
