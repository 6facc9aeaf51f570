"""Typed accessors for storyboards and their view controllers."""

from typing import Callable, List, Sequence

from ..core.code_model import (
    INIT_BUNDLE,
    RSWIFT_RESOURCES,
    UIKIT,
    Function,
    LetBinding,
    Struct,
    TypeReference,
    VarGetter,
)
from ..core.grouping import group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import StoryboardResource, ViewController
from ..frameworks.swift import string_literal
from .nibs import referenced_asset_checks

STORYBOARD_REFERENCE = TypeReference('StoryboardReference', RSWIFT_RESOURCES)

# Stored properties of every storyboard struct
RESERVED_NAMES = ('name', 'bundle')


def view_controller_getter(identifier: str, view_controller: ViewController) -> VarGetter:
    return VarGetter(
        name=sanitize(identifier),
        type_reference=TypeReference('StoryboardViewControllerIdentifier', RSWIFT_RESOURCES, (view_controller.type,)),
        value_code=f".init(identifier: {string_literal(identifier)}, storyboard: name, bundle: bundle)",
    )


class StoryboardGenerator:
    """Build the ``storyboard`` struct, one nested struct per storyboard."""

    def __init__(self, warning: Callable[[str], None], tool_name: str = 'swift-resource-generator'):
        self.warning = warning
        self.tool_name = tool_name

    def generate_struct(self, storyboards: Sequence[StoryboardResource], prefix: SymbolName) -> Struct:
        struct_name = sanitize('storyboard')
        qualified_name = prefix + struct_name

        grouped = group_by_identifier(storyboards, lambda s: s.name)
        grouped.report_warnings('storyboard', 'storyboard', self.warning)

        structs = sorted(
            (self._storyboard_struct(storyboard, qualified_name) for storyboard in grouped.items),
            key=lambda s: s.name.value,
        )

        members: List = [INIT_BUNDLE]
        for struct in structs:
            members.append(struct.bundle_var_getter())
            members.append(struct)
        if structs:
            body = '\n'.join(f"try self.{s.name.value}.validate()" for s in structs)
            members.append(Function(name=sanitize('validate'), body=body, throws=True))

        comments = (
            f"This `{qualified_name.value}` struct is generated, and contains static references "
            f"to {len(structs)} storyboards.",
        )
        return Struct(name=struct_name, members=tuple(members), comments=comments)

    def _storyboard_struct(self, storyboard: StoryboardResource, prefix: SymbolName) -> Struct:
        identified = [
            (vc.storyboard_identifier, vc)
            for vc in storyboard.view_controllers
            if vc.storyboard_identifier is not None
        ]
        grouped = group_by_identifier(identified, lambda item: item[0])
        grouped.report_warnings(
            'view controller', 'view controller identifier', self.warning,
            container=f"in storyboard '{storyboard.name}'",
        )

        reserved = {sanitize(name) for name in RESERVED_NAMES}
        getters = []
        for symbol, (identifier, vc) in grouped.uniques:
            if symbol in reserved:
                self.warning(
                    f"Skipping 1 view controller because symbol '{identifier}' "
                    f"conflicts with reserved name '{symbol.value}'"
                )
                continue
            getters.append(view_controller_getter(identifier, vc))
        getters.sort(key=lambda getter: getter.name.value)

        checks = referenced_asset_checks(
            storyboard.used_images,
            storyboard.used_colors,
            f"storyboard '{storyboard.name}'",
            self.tool_name,
        )

        members = [
            INIT_BUNDLE,
            LetBinding(name=sanitize('name'), value_code=string_literal(storyboard.name)),
            *getters,
            Function(name=sanitize('validate'), body='\n'.join(checks), throws=True),
        ]
        return Struct(
            name=sanitize(storyboard.name),
            members=tuple(members),
            comments=(f"Storyboard `{storyboard.name}`.",),
            protocols=(STORYBOARD_REFERENCE,),
            module_references=(UIKIT,) if checks else (),
        )
