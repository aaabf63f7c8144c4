"""File-level markdown to JSON conversion."""

from .converter import ConversionResult, convert_file, read_markdown, write_json

__all__ = ["ConversionResult", "convert_file", "read_markdown", "write_json"]
