"""Typed accessors for nib files, plus validation of what they reference."""

from typing import Callable, List, Sequence

from ..core.code_model import (
    INIT_BUNDLE,
    RSWIFT_RESOURCES,
    UIKIT,
    Function,
    Struct,
    TypeReference,
    VarGetter,
)
from ..core.grouping import group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import NibResource
from ..frameworks.swift import string_literal

DEFAULT_ROOT_VIEW = TypeReference('UIView', UIKIT)


def referenced_asset_checks(
    used_images: Sequence[str],
    used_colors: Sequence[str],
    container: str,
    tool_name: str
) -> List[str]:
    """
    Swift statements that fail validation when a referenced asset is missing.

    Shared by nibs and storyboards.

    Args:
        used_images: Image names referenced from the interface file
        used_colors: Color names referenced from the interface file
        container: Description for messages, e.g. "nib 'Cell'"
        tool_name: Prefix for messages

    Returns:
        One statement per distinct image and color, sorted by name
    """
    lines = []
    for image in sorted(set(used_images)):
        message = string_literal(f"[{tool_name}] Image named '{image}' is used in {container}, but couldn't be loaded.")
        lines.append(
            f"if UIKit.UIImage(named: {string_literal(image)}, in: bundle, compatibleWith: nil) == nil "
            f"{{ throw RswiftResources.ValidationError({message}) }}"
        )
    for color in sorted(set(used_colors)):
        message = string_literal(f"[{tool_name}] Color named '{color}' is used in {container}, but couldn't be loaded.")
        lines.append(
            f"if UIKit.UIColor(named: {string_literal(color)}, in: bundle, compatibleWith: nil) == nil "
            f"{{ throw RswiftResources.ValidationError({message}) }}"
        )
    return lines


def nib_getter(nib: NibResource) -> VarGetter:
    root_view = nib.root_views[0] if nib.root_views else DEFAULT_ROOT_VIEW
    return VarGetter(
        name=sanitize(nib.name),
        type_reference=TypeReference('NibReference', RSWIFT_RESOURCES, (root_view,)),
        value_code=f".init(name: {string_literal(nib.name)}, bundle: bundle)",
        comments=(f"Nib `{nib.name}`.",),
    )


def generate_nib_struct(
    nibs: Sequence[NibResource],
    prefix: SymbolName,
    warning: Callable[[str], None],
    tool_name: str = 'swift-resource-generator'
) -> Struct:
    """Build the ``nib`` struct; ``validate()`` checks images and colors used by the nibs."""
    struct_name = sanitize('nib')
    qualified_name = prefix + struct_name

    grouped = group_by_identifier(nibs, lambda n: n.name)
    grouped.report_warnings('xib', 'nib', warning)

    getters = [nib_getter(nib) for nib in grouped.items]

    checks = []
    for nib in grouped.items:
        checks.extend(referenced_asset_checks(nib.used_images, nib.used_colors, f"nib '{nib.name}'", tool_name))

    members: List = [INIT_BUNDLE, *getters]
    if getters:
        members.append(Function(name=sanitize('validate'), body='\n'.join(checks), throws=True))

    comments = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to {len(getters)} nibs.",
    )
    module_references = (UIKIT,) if checks else ()
    return Struct(
        name=struct_name,
        members=tuple(members),
        comments=comments,
        module_references=module_references,
    )
