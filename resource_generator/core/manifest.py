"""Loading of the project manifest (resources.yml) into ProjectResources."""

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import yaml

from ..features.formats import SPECIFIER_NAMES, parse_format_params
from ..frameworks.base import BaseAdapter
from ..frameworks.swift import SwiftAdapter
from .code_model import TypeReference
from .errors import GenerationError, ResourceParsingError
from .models import (
    AssetCatalog,
    ColorResource,
    DataResource,
    FileResource,
    FontResource,
    FormatParam,
    ImageResource,
    LocalizableStrings,
    LocalizedEntry,
    LocaleReference,
    NibResource,
    ProjectResources,
    PropertyListResource,
    Reusable,
    Segue,
    StoryboardResource,
    ViewController,
)
from .namespace import Namespace

logger = logging.getLogger(__name__)

# icon@2x.png, icon~ipad.png, icon@3x~iphone.png
_SCALE_SUFFIX = re.compile(r'(@\d+x)?(~(iphone|ipad))?$')

IMAGE_EXTENSIONS = ('png', 'jpg', 'jpeg', 'gif', 'pdf', 'heic', 'svg')


def _require_mapping(value: Any, what: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ResourceParsingError(f"Invalid {what}: expected a mapping, got {type(value).__name__}")
    return value


def _require_str(record: Mapping, key: str, what: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value:
        raise ResourceParsingError(f"Invalid {what}: missing '{key}'")
    return value


def _list(record: Mapping, key: str, what: str) -> List:
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResourceParsingError(f"Invalid {what}: '{key}' must be a list, got {type(value).__name__}")
    return value


def _str_list(record: Mapping, key: str, what: str) -> Tuple[str, ...]:
    value = _list(record, key, what)
    if not all(isinstance(v, str) for v in value):
        raise ResourceParsingError(f"Invalid {what}: '{key}' must be a list of strings")
    return tuple(value)


def _optional_tags(record: Mapping, what: str) -> Optional[Tuple[str, ...]]:
    if record.get('on_demand_resource_tags') is None:
        return None
    return _str_list(record, 'on_demand_resource_tags', what)


def _locale(record: Mapping, what: str) -> LocaleReference:
    value = record.get('locale')
    if value is not None and not isinstance(value, str):
        raise ResourceParsingError(f"Invalid {what}: 'locale' must be a string, got {type(value).__name__}")
    return LocaleReference.parse(value)


def _type(record: Mapping, key: str, what: str, default: str) -> TypeReference:
    value = record.get(key, default)
    if not isinstance(value, str) or not value.strip() or value.strip().endswith('.'):
        raise ResourceParsingError(f"Invalid {what}: '{key}' must be a type name")
    return TypeReference.parse(value)


def locale_from_path(path: str, adapter: BaseAdapter) -> LocaleReference:
    """Locale of a resource path, taken from its ``.lproj`` folder."""
    return adapter.extract_locale(Path(path))


def image_name(filename: str) -> str:
    """
    Image name as passed to ``UIImage(named:)``.

    Examples:
        image_name('icon@2x.png')      -> icon
        image_name('logo~ipad.png')    -> logo
        image_name('photo.jpg')        -> photo.jpg
    """
    stem, dot, extension = filename.rpartition('.')
    if not dot:
        stem, extension = filename, ''
    stem = _SCALE_SUFFIX.sub('', stem)
    if extension.lower() == 'png' or not extension:
        return stem
    return f"{stem}.{extension}"


class ProjectLoader:
    """
    Decode a YAML manifest into project resources.

    Unreadable manifests are fatal. A malformed record is reported through
    the warning sink and skipped, the rest of the manifest still loads.

    Usage:
        loader = ProjectLoader(warning=print)
        resources = loader.load(Path('resources.yml'))
    """

    def __init__(
        self,
        adapter: Optional[BaseAdapter] = None,
        warning: Optional[Callable[[str], None]] = None
    ):
        self.adapter = adapter or SwiftAdapter()
        self.warning = warning or (lambda message: None)

    def load(self, path: Path) -> ProjectResources:
        """
        Load a manifest file.

        Relative resource paths inside the manifest are resolved against
        the manifest's directory.

        Raises:
            GenerationError: If the file can't be read or isn't a YAML mapping
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise GenerationError(f"Manifest could not be read: {path} ({e.strerror})")
        except yaml.YAMLError as e:
            raise GenerationError(f"Manifest is not valid YAML: {path} ({e})")

        logger.debug("Loaded manifest %s", path)
        return self.parse(data, path.parent)

    def parse(self, data: Any, base_dir: Optional[Path] = None) -> ProjectResources:
        """Decode an already parsed manifest document."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise GenerationError(f"Manifest must be a mapping, got {type(data).__name__}")

        base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

        region = data.get('development_region')
        tags = data.get('known_asset_tags')
        if tags is not None and not (isinstance(tags, list) and all(isinstance(t, str) for t in tags)):
            self.warning("Ignoring known_asset_tags, expected a list of strings")
            tags = None

        resources = ProjectResources(
            development_region=str(region) if region is not None else None,
            known_asset_tags=tags,
        )
        resources.images = self._records(data, 'images', self._image)
        resources.files = self._records(data, 'files', self._file)
        resources.fonts = self._records(data, 'fonts', self._font)
        resources.asset_catalogs = self._records(data, 'asset_catalogs', self._asset_catalog)
        resources.localizable_strings = self._records(
            data, 'strings', lambda record: self._strings(record, base_dir))
        resources.nibs = self._records(data, 'nibs', self._nib)
        resources.storyboards = self._records(data, 'storyboards', self._storyboard)
        resources.info_plists = self._records(data, 'info_plists', self._property_list)
        resources.code_sign_entitlements = self._records(data, 'entitlements', self._property_list)

        logger.info("Manifest records: %s", ', '.join(f"{k}={v}" for k, v in resources.counts().items()))
        return resources

    def _records(self, data: Mapping, section: str, parse: Callable[[Any], Any]) -> List:
        raw = data.get(section) or []
        if not isinstance(raw, list):
            self.warning(f"Skipping section '{section}', expected a list")
            return []

        records = []
        for index, record in enumerate(raw):
            try:
                records.append(parse(record))
            except ResourceParsingError as e:
                self.warning(f"Skipping {section}[{index}]: {e.description}")
        return records

    def _image(self, record: Any) -> ImageResource:
        if not isinstance(record, str):
            raise ResourceParsingError("Invalid image: expected a file path")
        path = PurePosixPath(record)
        return ImageResource(
            name=image_name(path.name),
            locale=locale_from_path(record, self.adapter),
        )

    def _file(self, record: Any) -> FileResource:
        if not isinstance(record, str):
            raise ResourceParsingError("Invalid file: expected a file path")
        filename = PurePosixPath(record).name
        name, dot, extension = filename.rpartition('.')
        if not dot or not name:
            name, extension = filename, ''
        return FileResource(
            name=name,
            path_extension=extension,
            locale=locale_from_path(record, self.adapter),
        )

    def _font(self, record: Any) -> FontResource:
        record = _require_mapping(record, 'font')
        return FontResource(
            name=_require_str(record, 'name', 'font'),
            filename=_require_str(record, 'filename', 'font'),
        )

    def _asset_catalog(self, record: Any) -> AssetCatalog:
        record = _require_mapping(record, 'asset catalog')
        filename = _require_str(record, 'filename', 'asset catalog')
        return AssetCatalog(filename=filename, root=self._namespace(record, ()))

    def _namespace(self, record: Mapping, path: Tuple[str, ...]) -> Namespace:
        record = _require_mapping(record, 'asset namespace')

        images = tuple(
            ImageResource(
                name=_require_str(r, 'name', 'image'),
                path=path,
                on_demand_resource_tags=_optional_tags(r, 'image'),
            )
            for r in (_require_mapping(r, 'image') for r in _list(record, 'images', 'asset namespace'))
        )
        colors = tuple(
            ColorResource(name=_require_str(r, 'name', 'color'), path=path)
            for r in (_require_mapping(r, 'color') for r in _list(record, 'colors', 'asset namespace'))
        )
        data_assets = tuple(
            DataResource(
                name=_require_str(r, 'name', 'data asset'),
                path=path,
                on_demand_resource_tags=_optional_tags(r, 'data asset'),
            )
            for r in (_require_mapping(r, 'data asset') for r in _list(record, 'data', 'asset namespace'))
        )

        children = _require_mapping(record.get('namespaces') or {}, 'asset namespaces')
        subnamespaces = {
            str(name): self._namespace(child or {}, path + (str(name),))
            for name, child in children.items()
        }
        return Namespace(images=images, colors=colors, data_assets=data_assets, subnamespaces=subnamespaces)

    def _strings(self, record: Any, base_dir: Path) -> LocalizableStrings:
        record = _require_mapping(record, 'strings table')

        if 'file' in record:
            relative = _require_str(record, 'file', 'strings table')
            file_path = base_dir / relative
            filename = PurePosixPath(relative).stem
            entries = self.adapter.parse_localization_file(file_path)
            dictionary = {
                key: LocalizedEntry(value, tuple(parse_format_params(value)))
                for key, value in entries.items()
            }
            if record.get('locale') is not None:
                locale = _locale(record, 'strings table')
            else:
                locale = locale_from_path(relative, self.adapter)
            return LocalizableStrings(
                filename=filename,
                locale=locale,
                dictionary=dictionary,
            )

        filename = _require_str(record, 'filename', 'strings table')
        entries = _require_mapping(record.get('entries') or {}, 'strings entries')
        dictionary = {str(key): self._entry(key, value) for key, value in entries.items()}
        return LocalizableStrings(
            filename=filename,
            locale=_locale(record, 'strings table'),
            dictionary=dictionary,
        )

    def _entry(self, key: Any, value: Any) -> LocalizedEntry:
        """A plain string, or ``{value, params}`` with explicit (named) params."""
        if isinstance(value, str):
            return LocalizedEntry(value, tuple(parse_format_params(value)))

        value = _require_mapping(value, f"strings entry '{key}'")
        text = value.get('value', '')
        if not isinstance(text, str):
            raise ResourceParsingError(f"Invalid strings entry '{key}': 'value' must be a string")
        if 'params' not in value:
            return LocalizedEntry(text, tuple(parse_format_params(text)))

        params = []
        for param in _list(value, 'params', f"strings entry '{key}'"):
            param = _require_mapping(param, f"parameter of '{key}'")
            spec_name = str(param.get('type', 'any')).lower()
            if spec_name not in SPECIFIER_NAMES:
                raise ResourceParsingError(
                    f"Invalid strings entry '{key}': unknown parameter type '{spec_name}'"
                )
            name = param.get('name')
            params.append(FormatParam(SPECIFIER_NAMES[spec_name], str(name) if name else None))
        return LocalizedEntry(text, tuple(params))

    def _nib(self, record: Any) -> NibResource:
        record = _require_mapping(record, 'nib')
        return NibResource(
            name=_require_str(record, 'name', 'nib'),
            locale=_locale(record, 'nib'),
            root_views=tuple(TypeReference.parse(v) for v in _str_list(record, 'root_views', 'nib')),
            reusables=self._reusables(record, 'nib'),
            used_images=_str_list(record, 'images', 'nib'),
            used_colors=_str_list(record, 'colors', 'nib'),
            used_accessibility_identifiers=_str_list(record, 'accessibility_identifiers', 'nib'),
        )

    def _reusables(self, record: Mapping, what: str) -> Tuple[Reusable, ...]:
        reusables = []
        for reusable in _list(record, 'reusables', what):
            reusable = _require_mapping(reusable, f"reusable in {what}")
            reusables.append(Reusable(
                identifier=_require_str(reusable, 'identifier', 'reusable'),
                type=_type(reusable, 'type', 'reusable', 'UIKit.UIView'),
            ))
        return tuple(reusables)

    def _view_controller(self, record: Any, storyboard: str) -> ViewController:
        what = f"view controller in storyboard '{storyboard}'"
        record = _require_mapping(record, what)
        identifier = record.get('storyboard_identifier')

        segues = []
        for segue in _list(record, 'segues', what):
            segue = _require_mapping(segue, f"segue in storyboard '{storyboard}'")
            segues.append(Segue(
                identifier=_require_str(segue, 'identifier', 'segue'),
                destination=str(segue.get('destination', '')),
                type=_type(segue, 'type', 'segue', 'UIKit.UIStoryboardSegue'),
            ))

        return ViewController(
            id=str(record.get('id', identifier or '')),
            type=_type(record, 'type', what, 'UIKit.UIViewController'),
            storyboard_identifier=str(identifier) if identifier is not None else None,
            segues=tuple(segues),
        )

    def _storyboard(self, record: Any) -> StoryboardResource:
        record = _require_mapping(record, 'storyboard')
        name = _require_str(record, 'name', 'storyboard')
        view_controllers = tuple(
            self._view_controller(vc, name) for vc in _list(record, 'view_controllers', 'storyboard')
        )
        return StoryboardResource(
            name=name,
            locale=_locale(record, 'storyboard'),
            view_controllers=view_controllers,
            reusables=self._reusables(record, 'storyboard'),
            used_images=_str_list(record, 'images', 'storyboard'),
            used_colors=_str_list(record, 'colors', 'storyboard'),
            used_accessibility_identifiers=_str_list(record, 'accessibility_identifiers', 'storyboard'),
        )

    def _property_list(self, record: Any) -> PropertyListResource:
        record = _require_mapping(record, 'property list')
        contents: Dict[str, Any] = dict(_require_mapping(record.get('contents') or {}, 'property list contents'))
        return PropertyListResource(
            build_configuration_name=_require_str(record, 'build_configuration', 'property list'),
            contents=contents,
        )


def load_project(path: Path, warning: Optional[Callable[[str], None]] = None) -> ProjectResources:
    """Shortcut for ``ProjectLoader(warning=warning).load(path)``."""
    return ProjectLoader(warning=warning).load(path)
