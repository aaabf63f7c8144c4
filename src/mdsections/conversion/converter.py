"""Read a markdown file, extract its sections and write them as JSON."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mdsections.core import ConvertConfig, SectionMap
from mdsections.extraction import extract_sections, render_json

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a single conversion run."""

    input_path: Path
    output_path: Path
    sections: SectionMap = field(default_factory=dict)
    output: str = ""

    @property
    def header_count(self) -> int:
        """Number of distinct header keys in the output."""
        return len(self.sections)


def read_markdown(path: Path) -> str:
    """Read a markdown file as strict UTF-8 text, line endings untranslated."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_json(path: Path, output: str) -> None:
    """Write rendered JSON to disk as UTF-8."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(output)


def convert_file(config: ConvertConfig, write: bool = True) -> ConversionResult:
    """Convert the configured markdown file into a JSON section map.

    The input is read completely before extraction starts, and the output
    is written only after extraction and rendering have finished. I/O and
    decoding errors propagate to the caller.

    Args:
        config: Input and output paths
        write: If False, render the JSON but leave the output file untouched

    Returns:
        ConversionResult with the extracted sections and rendered JSON
    """
    logger.debug("Reading markdown from %s", config.input_path)
    content = read_markdown(config.input_path)

    sections = extract_sections(content)
    logger.debug("Extracted %d header(s) from %d characters", len(sections), len(content))

    output = render_json(sections)

    if write:
        write_json(config.output_path, output)
        logger.debug("Wrote %d bytes to %s", len(output.encode("utf-8")), config.output_path)
    else:
        logger.debug("Dry run, skipping write to %s", config.output_path)

    return ConversionResult(
        input_path=config.input_path,
        output_path=config.output_path,
        sections=sections,
        output=output,
    )
