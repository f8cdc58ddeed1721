# ABOUTME: Configuration assembly pipeline components
# ABOUTME: Exports interpolation, merge, loading, freezing and file access building blocks

from .dotenv_loader import load_dotenv_file, read_dotenv_file
from .env_file_reader import EnvFileReader
from .freezer import deep_freeze, is_frozen, thaw
from .interpolation import interpolate
from .section_applier import SectionApplier, interpolate_document
from .settings_loader import SettingsLoader

__all__ = [
    "EnvFileReader",
    "SectionApplier",
    "SettingsLoader",
    "deep_freeze",
    "interpolate",
    "interpolate_document",
    "is_frozen",
    "load_dotenv_file",
    "read_dotenv_file",
    "thaw",
]
