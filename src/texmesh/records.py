# ABOUTME: Line and token splitting shared by the mesh and material readers
# ABOUTME: Lines end only at \n (optionally \r\n); tokens split only on ASCII whitespace

import re
from pathlib import Path
from typing import Iterator, List, Tuple

from .errors import MeshIOError

# Space, tab, LF, form feed, CR. Vertical tab and Unicode spaces are token characters.
_ASCII_WHITESPACE = re.compile(r'[ \t\n\x0c\r]+')


def read_lines(path: Path, encoding: str) -> List[str]:
    """
    Read a text file into lines split on '\\n', dropping one trailing '\\r' per line.

    Form feeds, vertical tabs and Unicode line separators stay inside the line
    they appear in, so line numbers count '\\n' characters only.

    Raises:
        MeshIOError: If the file can't be opened, read, or decoded
    """
    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MeshIOError(f"Cannot read file: {e}", path=path) from e

    if not text:
        return []

    lines = text.split('\n')
    # A final newline terminates the last line rather than starting a new one
    if text.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def split_tokens(line: str) -> List[str]:
    """Split a record on ASCII whitespace, ignoring leading and trailing runs."""
    return [token for token in _ASCII_WHITESPACE.split(line) if token]


def iter_records(path: Path, encoding: str) -> Iterator[Tuple[int, str, List[str]]]:
    """Yield (1-based line number, raw line, tokens) for every non-blank line."""
    for line_number, line in enumerate(read_lines(path, encoding), start=1):
        tokens = split_tokens(line)
        if tokens:
            yield line_number, line, tokens
