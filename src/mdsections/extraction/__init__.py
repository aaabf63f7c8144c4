"""Section extraction from markdown text."""

from .extractor import (
    HEADER_PATTERN,
    extract_sections,
    header_text,
    is_header,
    render_json,
    sections_to_dict,
)

__all__ = [
    "HEADER_PATTERN",
    "extract_sections",
    "header_text",
    "is_header",
    "render_json",
    "sections_to_dict",
]
