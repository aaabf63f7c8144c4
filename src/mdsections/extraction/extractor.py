"""Extract top-level header sections from flat markdown."""

import json
import re

from mdsections.core import HeaderEntry, SectionMap

# Whitespace as ECMAScript defines it for \s and trim(). Python's \s also
# takes \x1c-\x1f and \x85 but not \ufeff.
WHITESPACE = (
    '\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006'
    '\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
)
_WS_CLASS = '[' + re.escape(WHITESPACE) + ']'

# Exactly one '#', a whitespace run, then heading text. The text excludes
# line terminators, so a line ending in '\r' is not a header.
HEADER_PATTERN = re.compile(r'^#' + _WS_CLASS + r'+([^\n\r\u2028\u2029]+)$')
HEADER_MARKER = re.compile(r'^#' + _WS_CLASS + '+')


def is_header(line: str) -> bool:
    """Check whether a line is a level-1 ATX header.

    Lines starting with '##' or deeper never match.

    Args:
        line: A single line of markdown text

    Returns:
        True if the line starts a new top-level section
    """
    return HEADER_PATTERN.match(line) is not None


def header_text(line: str) -> str:
    """Strip the leading '#' and the whitespace run that follows it."""
    return HEADER_MARKER.sub('', line, count=1)


def _commit(sections: SectionMap, header: str, body: list[str]) -> None:
    sections[header] = HeaderEntry(description='\n'.join(body).strip(WHITESPACE))


def extract_sections(content: str) -> SectionMap:
    """Split markdown into header -> entry records.

    Every line after a top-level header, up to the next top-level header or
    the end of input, becomes that header's description. Lines before the
    first header are discarded. A repeated header keeps its first position
    but takes the body of its last occurrence.

    Args:
        content: The full markdown text

    Returns:
        Ordered mapping of header text to HeaderEntry
    """
    sections: SectionMap = {}
    current_header: str | None = None
    current_body: list[str] = []

    for line in content.split('\n'):
        if is_header(line):
            if current_header is not None:
                _commit(sections, current_header, current_body)
            current_header = header_text(line)
            current_body = []
        elif current_header is not None:
            current_body.append(line)

    if current_header is not None:
        _commit(sections, current_header, current_body)

    return sections


def sections_to_dict(sections: SectionMap) -> dict[str, dict]:
    """Convert extracted sections to plain JSON-ready data."""
    return {header: entry.model_dump() for header, entry in sections.items()}


def render_json(sections: SectionMap, indent: int = 2) -> str:
    """Serialize sections as pretty-printed JSON.

    Non-ASCII text is written as-is and no trailing newline is added.

    Args:
        sections: Mapping returned by extract_sections
        indent: Spaces per indentation level

    Returns:
        The JSON document as a string
    """
    return json.dumps(sections_to_dict(sections), indent=indent, ensure_ascii=False)
