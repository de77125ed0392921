import os

from .parsers.html import parse_html
from .parsers.javascript import parse_javascript


parsers = {
    "CJS": parse_javascript,
    "HTM": parse_html,
    "HTML": parse_html,
    "JS": parse_javascript,
    "JSX": parse_javascript,
    "MJS": parse_javascript,
}


def extension_of(path):
    """Registry key for a file path: its extension, uppercased, no dot."""
    return os.path.splitext(path)[1][1:].upper()
