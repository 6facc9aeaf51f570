"""Per-kind struct builders."""

from .accessibility import generate_accessibility_identifier_struct
from .assets import generate_color_struct, generate_data_struct, generate_image_struct
from .files import generate_file_struct
from .fonts import generate_font_struct
from .nibs import generate_nib_struct
from .property_lists import PropertyListGenerator
from .reusables import generate_reuse_identifier_struct
from .segues import generate_segue_struct
from .storyboards import StoryboardGenerator
from .strings import StringsGenerator

__all__ = [
    'generate_accessibility_identifier_struct',
    'generate_color_struct',
    'generate_data_struct',
    'generate_image_struct',
    'generate_file_struct',
    'generate_font_struct',
    'generate_nib_struct',
    'PropertyListGenerator',
    'generate_reuse_identifier_struct',
    'generate_segue_struct',
    'StoryboardGenerator',
    'StringsGenerator',
]
