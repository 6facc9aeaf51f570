"""Typed accessors for plain resource files."""

from typing import Callable, Sequence

from ..core.code_model import INIT_BUNDLE, RSWIFT_RESOURCES, Struct, TypeReference, VarGetter
from ..core.grouping import group_by, group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import FileResource
from ..frameworks.swift import locale_code_string, string_literal


def file_getter(resource: FileResource) -> VarGetter:
    code = (
        f".init(name: {string_literal(resource.name)}, pathExtension: {string_literal(resource.path_extension)}, "
        f"bundle: bundle, locale: {locale_code_string(resource.locale)})"
    )
    return VarGetter(
        name=sanitize(resource.fullname),
        type_reference=TypeReference('FileResource', RSWIFT_RESOURCES),
        value_code=code,
        comments=(f"Resource file `{resource.fullname}`.",),
    )


def generate_file_struct(
    resources: Sequence[FileResource],
    prefix: SymbolName,
    warning: Callable[[str], None]
) -> Struct:
    """
    Build the ``file`` struct.

    Localized copies of a file share one accessor; the contents of the
    different locales don't matter, so the first one is used.
    """
    struct_name = sanitize('file')
    qualified_name = prefix + struct_name

    localized = list(group_by(resources, lambda r: r.fullname).items())
    grouped = group_by_identifier(localized, lambda item: item[0])
    grouped.report_warnings('resource file', 'file', warning)

    getters = [file_getter(copies[0]) for _, copies in grouped.items]

    comments = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to {len(getters)} resource files.",
    )
    return Struct(name=struct_name, members=(INIT_BUNDLE, *getters), comments=comments)
