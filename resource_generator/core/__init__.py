"""Core modules: data model, identifiers, grouping and the generator."""

from .errors import GenerationError, ResourceParsingError
from .identifiers import SymbolName, sanitize
from .models import ProjectResources, ResourceKind
from .generator import GenerationResult, GeneratorOptions, ResourceGenerator, WarningLog
from .manifest import ProjectLoader

__all__ = [
    'GenerationError',
    'ResourceParsingError',
    'SymbolName',
    'sanitize',
    'ProjectResources',
    'ResourceKind',
    'GenerationResult',
    'GeneratorOptions',
    'ResourceGenerator',
    'WarningLog',
    'ProjectLoader',
]
