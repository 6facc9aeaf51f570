"""Decoded resource records, the input of the generator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .code_model import STDLIB, UIKIT, TypeReference
from .namespace import Namespace


@dataclass(frozen=True)
class LocaleReference:
    """
    Locale of a resource: none, base (region neutral) or a named language.

    Attributes:
        language: Language code, ``None`` for no locale
        base: True for ``Base.lproj`` resources
    """
    language: Optional[str] = None
    base: bool = False

    @classmethod
    def none(cls) -> 'LocaleReference':
        return cls()

    @classmethod
    def base_locale(cls) -> 'LocaleReference':
        return cls(base=True)

    @classmethod
    def from_language(cls, language: str) -> 'LocaleReference':
        return cls(language=language)

    @classmethod
    def parse(cls, value: Optional[str]) -> 'LocaleReference':
        """``None``/empty is no locale, ``Base`` (any case) is base."""
        if not value:
            return cls.none()
        if value.lower() == 'base':
            return cls.base_locale()
        return cls.from_language(value)

    @property
    def is_none(self) -> bool:
        return not self.base and self.language is None

    @property
    def is_base(self) -> bool:
        return self.base

    @property
    def locale_description(self) -> Optional[str]:
        if self.base:
            return 'Base'
        return self.language

    def debug_description(self, filename: str) -> str:
        """``'Localizable'``, ``'Localizable' (Base)`` or ``'Localizable' (nl)``."""
        if self.locale_description is None:
            return f"'{filename}'"
        return f"'{filename}' ({self.locale_description})"


class FormatSpecifier(Enum):
    """Semantic type of one interpolated parameter."""
    STRING = 'String'
    INT = 'Int'
    UNSIGNED_INT = 'UInt'
    FLOAT = 'Double'
    CHAR = 'Character'
    CVARARGS_OBJECT = 'CVarArg'
    TOP_TYPE = 'Any'

    @property
    def type_reference(self) -> TypeReference:
        return TypeReference(self.value, STDLIB)


@dataclass(frozen=True)
class FormatParam:
    spec: FormatSpecifier
    name: Optional[str] = None


@dataclass(frozen=True)
class LocalizedEntry:
    original_value: str
    params: Tuple[FormatParam, ...] = ()


@dataclass(frozen=True)
class LocalizableStrings:
    """One localization table (filename + locale pair)."""
    filename: str
    locale: LocaleReference
    dictionary: Mapping[str, LocalizedEntry]
    path: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.filename


@dataclass(frozen=True)
class ImageResource:
    name: str
    locale: LocaleReference = field(default_factory=LocaleReference.none)
    path: Tuple[str, ...] = ()
    on_demand_resource_tags: Optional[Tuple[str, ...]] = None

    @property
    def fullname(self) -> str:
        return '/'.join(self.path + (self.name,))


@dataclass(frozen=True)
class ColorResource:
    name: str
    path: Tuple[str, ...] = ()
    locale: LocaleReference = field(default_factory=LocaleReference.none)

    @property
    def fullname(self) -> str:
        return '/'.join(self.path + (self.name,))


@dataclass(frozen=True)
class DataResource:
    name: str
    path: Tuple[str, ...] = ()
    locale: LocaleReference = field(default_factory=LocaleReference.none)
    on_demand_resource_tags: Optional[Tuple[str, ...]] = None

    @property
    def fullname(self) -> str:
        return '/'.join(self.path + (self.name,))


@dataclass(frozen=True)
class FileResource:
    name: str
    path_extension: str = ''
    locale: LocaleReference = field(default_factory=LocaleReference.none)
    path: Tuple[str, ...] = ()

    @property
    def fullname(self) -> str:
        if not self.path_extension:
            return self.name
        return f"{self.name}.{self.path_extension}"


@dataclass(frozen=True)
class FontResource:
    name: str
    filename: str
    locale: LocaleReference = field(default_factory=LocaleReference.none)
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Reusable:
    """A cell or view dequeued by its reuse identifier."""
    identifier: str
    type: TypeReference


@dataclass(frozen=True)
class NibResource:
    name: str
    locale: LocaleReference = field(default_factory=LocaleReference.none)
    root_views: Tuple[TypeReference, ...] = ()
    reusables: Tuple[Reusable, ...] = ()
    used_images: Tuple[str, ...] = ()
    used_colors: Tuple[str, ...] = ()
    used_accessibility_identifiers: Tuple[str, ...] = ()
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Segue:
    """
    A storyboard segue with an identifier.

    Attributes:
        identifier: Identifier passed to ``performSegue(withIdentifier:)``
        destination: Id of the destination view controller in the storyboard
        type: Segue class
    """
    identifier: str
    destination: str
    type: TypeReference = TypeReference('UIStoryboardSegue', UIKIT)


@dataclass(frozen=True)
class ViewController:
    id: str
    type: TypeReference
    storyboard_identifier: Optional[str] = None
    segues: Tuple[Segue, ...] = ()


@dataclass(frozen=True)
class StoryboardResource:
    name: str
    locale: LocaleReference = field(default_factory=LocaleReference.none)
    view_controllers: Tuple[ViewController, ...] = ()
    reusables: Tuple[Reusable, ...] = ()
    used_images: Tuple[str, ...] = ()
    used_colors: Tuple[str, ...] = ()
    used_accessibility_identifiers: Tuple[str, ...] = ()
    path: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PropertyListResource:
    """Property list contents for one build configuration."""
    build_configuration_name: str
    contents: Mapping[str, Any]
    path: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.build_configuration_name


@dataclass(frozen=True)
class AssetCatalog:
    filename: str
    root: Namespace

    @property
    def name(self) -> str:
        return self.filename


@dataclass
class ProjectResources:
    """Every decoded resource of one project target."""
    development_region: Optional[str] = None
    known_asset_tags: Optional[List[str]] = None
    asset_catalogs: List[AssetCatalog] = field(default_factory=list)
    files: List[FileResource] = field(default_factory=list)
    fonts: List[FontResource] = field(default_factory=list)
    images: List[ImageResource] = field(default_factory=list)
    localizable_strings: List[LocalizableStrings] = field(default_factory=list)
    nibs: List[NibResource] = field(default_factory=list)
    storyboards: List[StoryboardResource] = field(default_factory=list)
    info_plists: List[PropertyListResource] = field(default_factory=list)
    code_sign_entitlements: List[PropertyListResource] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        """Number of records per section, for reports."""
        return {
            'asset_catalogs': len(self.asset_catalogs),
            'files': len(self.files),
            'fonts': len(self.fonts),
            'images': len(self.images),
            'strings': len(self.localizable_strings),
            'nibs': len(self.nibs),
            'storyboards': len(self.storyboards),
            'info_plists': len(self.info_plists),
            'entitlements': len(self.code_sign_entitlements),
        }


class ResourceKind(Enum):
    """Generated resource kinds, in emission order."""
    STRING = 'string'
    DATA = 'data'
    COLOR = 'color'
    IMAGE = 'image'
    INFO = 'info'
    ENTITLEMENTS = 'entitlements'
    FONT = 'font'
    FILE = 'file'
    SEGUE = 'segue'
    ID = 'id'
    NIB = 'nib'
    REUSE_IDENTIFIER = 'reuseIdentifier'
    STORYBOARD = 'storyboard'

    @property
    def is_let_style(self) -> bool:
        """Reached through ``let kind = kind()`` instead of bundle accessors."""
        return self in (
            ResourceKind.ENTITLEMENTS,
            ResourceKind.FONT,
            ResourceKind.SEGUE,
            ResourceKind.ID,
            ResourceKind.REUSE_IDENTIFIER,
        )

    @property
    def validates(self) -> bool:
        """Resources of this kind can reference resources that might be absent."""
        return self in (ResourceKind.FONT, ResourceKind.NIB, ResourceKind.STORYBOARD)

    @classmethod
    def names(cls) -> List[str]:
        return [kind.value for kind in cls]

    @classmethod
    def from_names(cls, names: List[str]) -> List['ResourceKind']:
        """
        Parse generator names.

        Raises:
            ValueError: For an unknown name
        """
        kinds = []
        for name in names:
            try:
                kinds.append(cls(name.strip()))
            except ValueError:
                raise ValueError(f"Unknown generator '{name}'. Valid options: {', '.join(cls.names())}")
        return kinds
