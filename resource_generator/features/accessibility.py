"""Accessibility identifiers used in nibs and storyboards."""

from typing import Callable, List, Sequence, Tuple

from ..core.code_model import STRING, LetBinding, Struct
from ..core.grouping import group_by, group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import NibResource, StoryboardResource
from ..frameworks.swift import string_literal


def _interface_files(
    nibs: Sequence[NibResource],
    storyboards: Sequence[StoryboardResource]
) -> List[Tuple[str, List[str]]]:
    """(file name, identifiers) with localized copies of one file merged."""
    sources = [(n.name, n.used_accessibility_identifiers) for n in nibs]
    sources += [(s.name, s.used_accessibility_identifiers) for s in storyboards]

    files = []
    for name, copies in group_by(sources, lambda source: source[0]).items():
        identifiers = list(dict.fromkeys(i for _, ids in copies for i in ids))
        if identifiers:
            files.append((name, identifiers))
    return files


def file_struct(name: str, identifiers: Sequence[str], warning: Callable[[str], None]) -> Struct:
    grouped = group_by_identifier(sorted(identifiers), str)
    grouped.report_warnings(
        'accessibility identifier', 'accessibility identifier', warning,
        container=f"in '{name}'",
    )
    bindings = tuple(
        LetBinding(
            name=symbol,
            value_code=string_literal(identifier),
            type_reference=STRING,
            comments=(f"Accessibility identifier `{identifier}`.",),
        )
        for symbol, identifier in grouped.uniques
    )
    return Struct(
        name=sanitize(name),
        members=bindings,
        comments=(f"Accessibility identifiers from file `{name}`.",),
    )


def generate_accessibility_identifier_struct(
    nibs: Sequence[NibResource],
    storyboards: Sequence[StoryboardResource],
    prefix: SymbolName,
    warning: Callable[[str], None]
) -> Struct:
    """Build the ``id`` struct, one nested struct per nib or storyboard."""
    struct_name = sanitize('id')
    qualified_name = prefix + struct_name

    grouped = group_by_identifier(_interface_files(nibs, storyboards), lambda f: f[0])
    grouped.report_warnings('interface file', 'accessibility identifier struct', warning)

    structs = sorted(
        (file_struct(name, identifiers, warning) for name, identifiers in grouped.items),
        key=lambda s: s.name.value,
    )
    structs = [s for s in structs if s.members]

    members: List = []
    for struct in structs:
        members.append(struct.let_binding())
        members.append(struct)

    comments = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to accessibility identifiers of {len(structs)} files.",
    )
    return Struct(name=struct_name, members=tuple(members), comments=comments)
