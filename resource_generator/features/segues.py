"""Typed segue identifiers, grouped by the source view controller."""

from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..core.code_model import RSWIFT_RESOURCES, UIKIT, LetBinding, Struct, TypeReference
from ..core.grouping import group_by, group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import StoryboardResource
from ..frameworks.swift import string_literal

DEFAULT_DESTINATION = TypeReference('UIViewController', UIKIT)


@dataclass(frozen=True)
class SegueInfo:
    """A segue with its source and destination resolved to types."""
    identifier: str
    segue_type: TypeReference
    source: TypeReference
    destination: TypeReference

    @property
    def type_reference(self) -> TypeReference:
        return TypeReference(
            'SegueIdentifier', RSWIFT_RESOURCES, (self.segue_type, self.source, self.destination),
        )


def _type_name(reference: TypeReference) -> str:
    return f"{reference.module}.{reference.name}" if reference.module else reference.name


def collect_segues(storyboards: Sequence[StoryboardResource]) -> List[SegueInfo]:
    """
    All identified segues, in storyboard order.

    Destinations are looked up by id in the storyboard of the segue; one
    that cannot be found (a storyboard reference) is a UIViewController.
    """
    infos = []
    for storyboard in storyboards:
        by_id = {vc.id: vc for vc in storyboard.view_controllers}
        for vc in storyboard.view_controllers:
            for segue in vc.segues:
                destination = by_id.get(segue.destination)
                infos.append(SegueInfo(
                    identifier=segue.identifier,
                    segue_type=segue.type,
                    source=vc.type,
                    destination=destination.type if destination is not None else DEFAULT_DESTINATION,
                ))
    return list(dict.fromkeys(infos))


def segue_binding(info: SegueInfo, symbol: SymbolName) -> LetBinding:
    return LetBinding(
        name=symbol,
        value_code=f".init(identifier: {string_literal(info.identifier)})",
        type_reference=info.type_reference,
        comments=(f"Segue identifier `{info.identifier}`.",),
    )


def source_struct(source: TypeReference, infos: Sequence[SegueInfo], warning: Callable[[str], None]) -> Struct:
    consistent = []
    for identifier, variants in group_by(infos, lambda i: i.identifier).items():
        if len(variants) > 1:
            warning(
                f"Skipping {len(variants)} segues for '{_type_name(source)}' because symbol "
                f"'{sanitize(identifier).value}' would be generated for all of these segues, "
                f"but with a different destination or segue type"
            )
            continue
        consistent.append(variants[0])

    grouped = group_by_identifier(consistent, lambda i: i.identifier)
    grouped.report_warnings('segue', 'segue', warning, container=f"for '{_type_name(source)}'")

    bindings = sorted(
        (segue_binding(info, symbol) for symbol, info in grouped.uniques),
        key=lambda binding: binding.name.value,
    )
    return Struct(
        name=sanitize(source.name),
        members=tuple(bindings),
        comments=(f"Segues from `{_type_name(source)}`.",),
    )


def generate_segue_struct(
    storyboards: Sequence[StoryboardResource],
    prefix: SymbolName,
    warning: Callable[[str], None]
) -> Struct:
    """Build the ``segue`` struct, one nested struct per source view controller type."""
    struct_name = sanitize('segue')
    qualified_name = prefix + struct_name

    by_source = group_by(collect_segues(storyboards), lambda i: i.source)
    grouped = group_by_identifier(list(by_source), lambda source: source.name)
    grouped.report_warnings('view controller', 'segue struct', warning)

    structs = sorted(
        (source_struct(source, by_source[source], warning) for source in grouped.items),
        key=lambda s: s.name.value,
    )
    structs = [s for s in structs if s.members]

    members: List = []
    for struct in structs:
        members.append(struct.let_binding())
        members.append(struct)

    comments = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to {len(structs)} view controllers.",
    )
    return Struct(name=struct_name, members=tuple(members), comments=comments)
