"""
Swift Resource Generator
========================

Generates strongly typed Swift accessors (``R.image.icon``,
``R.string.localizable.greeting``) for the resources of an iOS project.

Usage:
    from resource_generator import ProjectLoader, ResourceGenerator

    resources = ProjectLoader().load(Path('resources.yml'))
    result = ResourceGenerator().generate(resources)
    Path('R.generated.swift').write_text(result.text)

CLI:
    swift-resource-generator init
    swift-resource-generator generate R.generated.swift
    swift-resource-generator print-command
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.errors import GenerationError, ResourceParsingError
from .core.generator import GenerationResult, GeneratorOptions, ResourceGenerator, WarningLog
from .core.manifest import ProjectLoader
from .core.models import ProjectResources, ResourceKind

# Framework adapters
from .frameworks.base import BaseAdapter
from .frameworks.swift import SwiftAdapter

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'GenerationError',
    'ResourceParsingError',
    'GenerationResult',
    'GeneratorOptions',
    'ResourceGenerator',
    'WarningLog',
    'ProjectLoader',
    'ProjectResources',
    'ResourceKind',
    'BaseAdapter',
    'SwiftAdapter',
]
