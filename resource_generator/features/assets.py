"""Typed accessors for images, colors and data assets."""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..core.code_model import INIT_BUNDLE, RSWIFT_RESOURCES, Struct, TypeReference, VarGetter
from ..core.grouping import group_by, group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import AssetCatalog, ColorResource, DataResource, ImageResource
from ..core.namespace import MergedNamespaces, Namespace, merge_namespaces
from ..frameworks.swift import locale_code_string, string_array_literal, string_literal

WarningSink = Callable[[str], None]


def _tags_code_string(tags: Optional[Sequence[str]]) -> str:
    return 'nil' if tags is None else string_array_literal(tags)


def _image_getter(image: ImageResource) -> VarGetter:
    code = (
        f".init(name: {string_literal(image.fullname)}, path: {string_array_literal(image.path)}, "
        f"bundle: bundle, locale: {locale_code_string(image.locale)}, "
        f"onDemandResourceTags: {_tags_code_string(image.on_demand_resource_tags)})"
    )
    return VarGetter(
        name=sanitize(image.name),
        type_reference=TypeReference('ImageResource', RSWIFT_RESOURCES),
        value_code=code,
        comments=(f"Image `{image.fullname}`.",),
    )


def _color_getter(color: ColorResource) -> VarGetter:
    code = (
        f".init(name: {string_literal(color.fullname)}, path: {string_array_literal(color.path)}, "
        f"bundle: bundle)"
    )
    return VarGetter(
        name=sanitize(color.name),
        type_reference=TypeReference('ColorResource', RSWIFT_RESOURCES),
        value_code=code,
        comments=(f"Color `{color.fullname}`.",),
    )


def _data_getter(data: DataResource) -> VarGetter:
    code = (
        f".init(name: {string_literal(data.fullname)}, path: {string_array_literal(data.path)}, "
        f"bundle: bundle, onDemandResourceTags: {_tags_code_string(data.on_demand_resource_tags)})"
    )
    return VarGetter(
        name=sanitize(data.name),
        type_reference=TypeReference('DataResource', RSWIFT_RESOURCES),
        value_code=code,
        comments=(f"Data asset `{data.fullname}`.",),
    )


@dataclass(frozen=True)
class AssetKind:
    """How one asset kind is read from a namespace and turned into getters."""
    attribute: str
    source: str
    result: str
    plural: str
    getter: Callable


IMAGE = AssetKind('images', 'image', 'image', 'images', _image_getter)
COLOR = AssetKind('colors', 'color', 'color', 'colors', _color_getter)
DATA = AssetKind('data_assets', 'data asset', 'data asset', 'data assets', _data_getter)


def generate_namespace_struct(
    namespace: Namespace,
    name: SymbolName,
    prefix: SymbolName,
    kind: AssetKind,
    warning: WarningSink
) -> Struct:
    """
    Build the struct for one namespace and, recursively, its children.

    Args:
        namespace: Merged namespace
        name: Struct name
        prefix: Qualified name of the enclosing struct
        kind: Asset kind to generate
        warning: Warning sink

    Returns:
        Struct, empty when the namespace holds nothing usable
    """
    qualified_name = prefix + name
    namespace = namespace.pruned(kind.attribute)

    grouped = group_by_identifier(getattr(namespace, kind.attribute), lambda r: r.name)
    grouped.report_warnings(kind.source, kind.result, warning)

    getters = [kind.getter(resource) for resource in grouped.items]

    merged = MergedNamespaces(namespace.subnamespaces, other_identifiers=grouped.symbols)
    merged.report_warnings(kind.result, warning)

    structs = [
        generate_namespace_struct(child, symbol, qualified_name, kind, warning)
        for symbol, child in merged.namespaces
    ]
    structs = [s for s in structs if not s.is_empty]

    comment = (
        f"This `{qualified_name.value}` struct is generated, and contains static references "
        f"to {len(getters)} {kind.plural}"
    )
    if structs:
        comment += f", and {len(structs)} namespaces"
    comment += '.'

    members: List = [INIT_BUNDLE]
    members.extend(getters)
    for struct in structs:
        members.append(struct.bundle_var_getter())
        members.append(struct)

    return Struct(name=name, members=tuple(members), comments=(comment,))


def generate_image_struct(
    catalogs: Sequence[AssetCatalog],
    toplevel: Sequence[ImageResource],
    prefix: SymbolName,
    warning: WarningSink
) -> Struct:
    """
    Build the ``image`` struct from asset catalogs and loose image files.

    Loose images sharing a name (``icon.png`` and ``icon@2x.png``) are one
    image; the first is kept.
    """
    named = [images[0] for images in group_by(toplevel, lambda image: image.name).values()]
    merged = merge_namespaces(catalog.root for catalog in catalogs)
    merged = merged.merging(Namespace(images=tuple(named)))

    return generate_namespace_struct(merged, sanitize('image'), prefix, IMAGE, warning)


def generate_color_struct(catalogs: Sequence[AssetCatalog], prefix: SymbolName, warning: WarningSink) -> Struct:
    merged = merge_namespaces(catalog.root for catalog in catalogs)
    return generate_namespace_struct(merged, sanitize('color'), prefix, COLOR, warning)


def generate_data_struct(catalogs: Sequence[AssetCatalog], prefix: SymbolName, warning: WarningSink) -> Struct:
    merged = merge_namespaces(catalog.root for catalog in catalogs)
    return generate_namespace_struct(merged, sanitize('data'), prefix, DATA, warning)
