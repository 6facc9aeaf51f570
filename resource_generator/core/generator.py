"""Resource aggregator: runs every kind builder and assembles the root struct."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional

from ..features.accessibility import generate_accessibility_identifier_struct
from ..features.assets import generate_color_struct, generate_data_struct, generate_image_struct
from ..features.files import generate_file_struct
from ..features.fonts import generate_font_struct
from ..features.nibs import generate_nib_struct
from ..features.property_lists import PropertyListGenerator
from ..features.reusables import generate_reuse_identifier_struct
from ..features.segues import generate_segue_struct
from ..features.storyboards import StoryboardGenerator
from ..features.strings import StringsGenerator
from ..frameworks.base import BaseAdapter
from ..frameworks.swift import SwiftAdapter, string_array_literal, string_literal
from .code_model import INIT_BUNDLE, Function, LetBinding, Struct
from .identifiers import SymbolName, sanitize
from .models import ProjectResources, ResourceKind

logger = logging.getLogger(__name__)

ROOT_NAME = SymbolName('_R')


class WarningLog:
    """
    Append-only warning sink.

    Collects messages in order and optionally forwards each one to another
    sink as it arrives.
    """

    def __init__(self, forward: Optional[Callable[[str], None]] = None):
        self.messages: List[str] = []
        self._forward = forward

    def __call__(self, message: str) -> None:
        self.messages.append(message)
        logger.debug("warning: %s", message)
        if self._forward is not None:
            self._forward(message)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass
class GeneratorOptions:
    """
    Settings consumed by the generator.

    Attributes:
        enabled_kinds: Kinds to generate, all when empty
        access_level: 'internal' or 'public'
        development_language: Overrides the project's development region
        additional_imports: Imported besides the inferred modules
    """
    enabled_kinds: FrozenSet[ResourceKind] = field(default_factory=frozenset)
    access_level: str = 'internal'
    development_language: Optional[str] = None
    additional_imports: FrozenSet[str] = field(default_factory=frozenset)

    def is_enabled(self, kind: ResourceKind) -> bool:
        return not self.enabled_kinds or kind in self.enabled_kinds


@dataclass
class GenerationResult:
    """Result of one generation run."""
    text: str
    root: Struct
    warnings: List[str] = field(default_factory=list)
    generated_kinds: List[ResourceKind] = field(default_factory=list)
    empty_kinds: List[ResourceKind] = field(default_factory=list)
    disabled_kinds: List[ResourceKind] = field(default_factory=list)


class ResourceGenerator:
    """
    Generate accessor code for all resources of a project.

    Features:
    - Fixed kind order, independent of input order
    - Disabled and empty kinds are left out entirely
    - Per-item problems become warnings, never errors
    - Same input, same output (text and warnings)

    Usage:
        generator = ResourceGenerator(GeneratorOptions(access_level='public'))
        result = generator.generate(resources)
        Path('R.generated.swift').write_text(result.text)
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        warning: Optional[Callable[[str], None]] = None,
        adapter: Optional[BaseAdapter] = None
    ):
        self.options = options or GeneratorOptions()
        self.adapter = adapter or SwiftAdapter()
        self._forward = warning

        self._builders: Dict[ResourceKind, Callable[[ProjectResources, Callable[[str], None]], Struct]] = {
            ResourceKind.STRING: self._build_strings,
            ResourceKind.DATA: lambda r, w: generate_data_struct(r.asset_catalogs, ROOT_NAME, w),
            ResourceKind.COLOR: lambda r, w: generate_color_struct(r.asset_catalogs, ROOT_NAME, w),
            ResourceKind.IMAGE: lambda r, w: generate_image_struct(r.asset_catalogs, r.images, ROOT_NAME, w),
            ResourceKind.INFO: lambda r, w: PropertyListGenerator('info', True, w).generate_struct(
                r.info_plists, ROOT_NAME),
            ResourceKind.ENTITLEMENTS: lambda r, w: PropertyListGenerator('entitlements', False, w).generate_struct(
                r.code_sign_entitlements, ROOT_NAME),
            ResourceKind.FONT: lambda r, w: generate_font_struct(r.fonts, ROOT_NAME, w, self.adapter.tool_name),
            ResourceKind.FILE: lambda r, w: generate_file_struct(r.files, ROOT_NAME, w),
            ResourceKind.SEGUE: lambda r, w: generate_segue_struct(r.storyboards, ROOT_NAME, w),
            ResourceKind.ID: lambda r, w: generate_accessibility_identifier_struct(
                r.nibs, r.storyboards, ROOT_NAME, w),
            ResourceKind.NIB: lambda r, w: generate_nib_struct(r.nibs, ROOT_NAME, w, self.adapter.tool_name),
            ResourceKind.REUSE_IDENTIFIER: lambda r, w: generate_reuse_identifier_struct(
                r.nibs, r.storyboards, ROOT_NAME, w),
            ResourceKind.STORYBOARD: lambda r, w: StoryboardGenerator(w, self.adapter.tool_name).generate_struct(
                r.storyboards, ROOT_NAME),
        }

    def development_language(self, resources: ProjectResources) -> Optional[str]:
        return self.options.development_language or resources.development_region

    def _build_strings(self, resources: ProjectResources, warning: Callable[[str], None]) -> Struct:
        generator = StringsGenerator(self.development_language(resources), warning)
        return generator.generate_struct(resources.localizable_strings, ROOT_NAME)

    def build_kind(self, kind: ResourceKind, resources: ProjectResources, warning: Callable[[str], None]) -> Struct:
        """Build the struct of one kind; per-item problems are reported by the builders."""
        return self._builders[kind](resources, warning)

    def project_struct(self, resources: ProjectResources) -> Struct:
        members = []
        if resources.development_region is not None:
            members.append(LetBinding(
                name=sanitize('developmentRegion'),
                value_code=string_literal(resources.development_region),
            ))
        if resources.known_asset_tags is not None:
            members.append(LetBinding(
                name=sanitize('knownAssetTags'),
                value_code=string_array_literal(resources.known_asset_tags),
            ))
        return Struct(name=sanitize('project'), members=tuple(members))

    def build(self, resources: ProjectResources, warning: Callable[[str], None]) -> GenerationResult:
        """Build the root struct without rendering it."""
        project = self.project_struct(resources)
        members: List = [INIT_BUNDLE, project.let_binding(), project]
        generated, empty, disabled = [], [], []
        validations = []

        for kind in ResourceKind:
            if not self.options.is_enabled(kind):
                disabled.append(kind)
                continue

            struct = self.build_kind(kind, resources, warning)
            if struct.is_empty:
                logger.debug("Skipping empty %s struct", kind.value)
                empty.append(kind)
                continue

            if kind.is_let_style:
                members.append(struct.let_binding())
            else:
                members.append(struct.bundle_var_getter())
                members.append(struct.bundle_function())
            members.append(struct)
            generated.append(kind)

            if kind.validates and struct.has_function('validate'):
                validations.append(f"try self.{struct.name.value}.validate()")

        members.append(Function(name=sanitize('validate'), body='\n'.join(validations), throws=True))

        root = Struct(name=ROOT_NAME, members=tuple(members))
        return GenerationResult(
            text='',
            root=root,
            generated_kinds=generated,
            empty_kinds=empty,
            disabled_kinds=disabled,
        )

    def generate(self, resources: ProjectResources) -> GenerationResult:
        """
        Generate the source file for a project.

        Args:
            resources: Decoded project resources

        Returns:
            GenerationResult with the rendered text and the warnings of this run
        """
        log = WarningLog(forward=self._forward)
        result = self.build(resources, log)

        printer = self.adapter.create_printer(self.options.access_level)
        result.text = printer.render_file(result.root, sorted(self.options.additional_imports))
        result.warnings = list(log.messages)

        logger.info(
            "Generated %d resource kinds (%d empty, %d warnings)",
            len(result.generated_kinds), len(result.empty_kinds), len(result.warnings),
        )
        return result


def generate(
    resources: ProjectResources,
    options: Optional[GeneratorOptions] = None,
    warning: Optional[Callable[[str], None]] = None
) -> GenerationResult:
    """Shortcut for ``ResourceGenerator(options, warning).generate(resources)``."""
    return ResourceGenerator(options, warning).generate(resources)


def parse_kinds(names: Iterable[str]) -> FrozenSet[ResourceKind]:
    """Generator names (e.g. from config) to kinds, empty means all."""
    return frozenset(ResourceKind.from_names([n for n in names if n.strip()]))
