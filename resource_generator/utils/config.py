"""Configuration management for the resource generator."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..core.models import ResourceKind
from .validators import is_valid_language_code, is_valid_module_name

CONFIG_FILENAME = '.resources.yml'

ACCESS_LEVELS = ('internal', 'public')
REPORT_FORMATS = ('console', 'json')


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class ProjectConfig:
    """Project configuration."""
    name: str = "Unnamed Project"
    manifest: str = "resources.yml"
    development_language: Optional[str] = None


@dataclass
class GeneratorConfig:
    """Code generation configuration."""
    # Empty list generates every kind
    generators: List[str] = field(default_factory=list)
    access_level: str = "internal"
    imports: List[str] = field(default_factory=list)
    output: str = "R.generated.swift"


@dataclass
class ReportsConfig:
    """Reports configuration."""
    formats: List[str] = field(default_factory=lambda: ["console"])
    output: str = "./resource_reports/"


@dataclass
class Config:
    """Main configuration class."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from YAML file, defaults when there is none."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILENAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            project=ProjectConfig(**data.get('project', {})),
            generator=GeneratorConfig(**data.get('generator', {})),
            reports=ReportsConfig(**data.get('reports', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'project': {
                'name': self.project.name,
                'manifest': self.project.manifest,
                'development_language': self.project.development_language,
            },
            'generator': {
                'generators': self.generator.generators,
                'access_level': self.generator.access_level,
                'imports': self.generator.imports,
                'output': self.generator.output,
            },
            'reports': {
                'formats': self.reports.formats,
                'output': self.reports.output,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILENAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> Tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        if self.generator.access_level not in ACCESS_LEVELS:
            errors.append(
                f"Invalid access level '{self.generator.access_level}'. "
                f"Valid options: {', '.join(ACCESS_LEVELS)}"
            )

        for name in self.generator.generators:
            if name not in ResourceKind.names():
                errors.append(
                    f"Unknown generator '{name}'. Valid options: {', '.join(ResourceKind.names())}"
                )

        for module in self.generator.imports:
            if not is_valid_module_name(module):
                errors.append(f"Invalid module name in generator.imports: '{module}'")

        if not self.generator.output:
            errors.append("generator.output cannot be empty")
        elif not self.generator.output.endswith('.swift'):
            warnings.append(ConfigValidationWarning(
                f"Output file does not have a .swift extension: {self.generator.output}"
            ))

        language = self.project.development_language
        if language is not None and not is_valid_language_code(language):
            errors.append(
                f"Invalid development language code: '{language}'. "
                f"Use a language code like 'en', 'nl' or 'pt-BR'"
            )

        if not Path(self.project.manifest).exists():
            warnings.append(ConfigValidationWarning(
                f"Manifest does not exist: {self.project.manifest}"
            ))

        for fmt in self.reports.formats:
            if fmt not in REPORT_FORMATS:
                warnings.append(ConfigValidationWarning(
                    f"Unknown report format: '{fmt}'. Valid options: {', '.join(REPORT_FORMATS)}"
                ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings


def create_default_config(project_name: Optional[str] = None) -> Config:
    """Create the configuration written by ``init``."""
    config = Config()
    if project_name:
        config.project.name = project_name
    config.project.development_language = 'en'
    return config
