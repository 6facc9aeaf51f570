"""Base adapter interface for target languages."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from ..core.models import LocaleReference


class BaseAdapter(ABC):
    """Base adapter for language-specific resource handling and code output."""

    #: Name printed in generated file headers and warnings
    tool_name = 'swift-resource-generator'

    @abstractmethod
    def get_localization_file_extensions(self) -> List[str]:
        """Return extensions of localization tables (e.g., ['.strings'])."""
        pass

    @abstractmethod
    def parse_localization_file(self, file_path: Path) -> Dict[str, str]:
        """
        Parse localization file and return key-value pairs.

        Args:
            file_path: Path to localization file

        Returns:
            Dictionary of key-value pairs, in file order

        Raises:
            ResourceParsingError: If the file cannot be read
        """
        pass

    @abstractmethod
    def extract_language_code(self, file_path: Path) -> Optional[str]:
        """
        Extract the locale of a localized resource from its path.

        Args:
            file_path: Resource path

        Returns:
            Language code, 'Base', or None for unlocalized resources
        """
        pass

    def extract_locale(self, file_path: Path) -> LocaleReference:
        return LocaleReference.parse(self.extract_language_code(Path(file_path)))

    @abstractmethod
    def create_printer(self, access_level: str = 'internal'):
        """Return the printer that renders the code model for this language."""
        pass

    def warning_prefix(self) -> str:
        """Prefix understood by IDE build logs."""
        return f"warning: [{self.tool_name}]"
