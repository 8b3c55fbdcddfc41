"""Line grammar shared by the skin's text config files."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional, Tuple

from wsz_kit.errors import SkinNotFoundError
from wsz_kit.io.archive import find_entry


def content_lines(text: str, comment_prefix: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` for lines that carry content.

    Line numbers are 1-based; blank lines and whole-line comments are dropped.
    """

    for index, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(comment_prefix):
            continue
        yield index, line


def section_header(line: str) -> Optional[str]:
    """Return the section name of a ``[Section]`` line, or None."""

    if line.startswith("[") and line.endswith("]"):
        return line[1:-1].strip()
    return None


def key_value(line: str) -> Optional[Tuple[str, str]]:
    """Split ``key=value`` on the first ``=``, or return None."""

    if "=" not in line:
        return None
    key, value = line.split("=", 1)
    return key.strip(), value.strip()


def read_text_entry(archive: Mapping[str, bytes], filename: str) -> str:
    """Return the decoded contents of a text file anywhere in the archive."""

    key = find_entry(archive, filename)
    if key is None:
        raise SkinNotFoundError(filename)
    return archive[key].decode("utf-8", errors="replace")
