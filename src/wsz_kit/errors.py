"""Exception types raised while reading, cutting and rendering skins.

Everything derives from ``SkinError`` so callers can catch the whole family,
while ``SkinNotFoundError`` lets the optional config files fall back to
defaults without hiding real failures.
"""

from __future__ import annotations


class SkinError(Exception):
    """Base class for all skin handling failures."""


class ArchiveError(SkinError):
    """The skin archive is not a readable zip container."""


class SkinNotFoundError(SkinError):
    """A file expected inside the archive is missing."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Not found: {name}")


class ImageCodecError(SkinError):
    """An image could not be decoded or encoded."""


class ArgumentError(SkinError):
    """An unknown sprite, sheet or placement identifier was supplied."""


class OutOfBoundsError(ArgumentError):
    """A placement does not fit inside the output canvas."""


class InvalidFormatError(SkinError):
    """A text config file violates its line grammar."""

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        self.message = message
        super().__init__(f"Invalid format on line {line}: {message}")
