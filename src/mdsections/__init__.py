"""Convert flat markdown documents into header-keyed JSON records."""

from .core import ConvertConfig, HeaderEntry
from .extraction import extract_sections, render_json

__version__ = "0.1.0"

__all__ = ["ConvertConfig", "HeaderEntry", "extract_sections", "render_json", "__version__"]
