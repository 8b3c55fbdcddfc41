"""Reading and writing the zip container of a skin as ``name -> bytes``."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from wsz_kit.errors import ArchiveError

SkinArchive = Dict[str, bytes]


def _read_zip(source: Union[Path, io.BytesIO]) -> SkinArchive:
    contents: SkinArchive = {}
    try:
        with zipfile.ZipFile(source) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                contents[info.filename] = archive.read(info)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, NotImplementedError) as exc:
        raise ArchiveError(f"ZIP error: {exc}") from exc
    return contents


def read_archive(path: Path) -> SkinArchive:
    """Unpack a ``.wsz`` file into memory, skipping directory entries."""

    return _read_zip(Path(path))


def read_archive_bytes(data: bytes) -> SkinArchive:
    """Unpack an in-memory ``.wsz`` payload."""

    return _read_zip(io.BytesIO(data))


def write_archive(path: Path, contents: Mapping[str, bytes]) -> None:
    """Write ``name -> bytes`` entries into a deflated zip, in sorted order."""

    with zipfile.ZipFile(Path(path), "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name in sorted(contents):
            archive.writestr(name, contents[name])


def entry_basename(name: str) -> str:
    """Strip any directory prefix from an archive key."""

    return name.replace("\\", "/").rsplit("/", 1)[-1]


def find_entry(archive: Mapping[str, bytes], filename: str) -> Optional[str]:
    """Find the key for ``filename`` ignoring case and directory prefixes.

    A top-level match wins over one nested in a directory.
    """

    wanted = filename.lower()
    nested: Optional[str] = None
    for key in sorted(archive):
        if key.lower() == wanted:
            return key
        if nested is None and entry_basename(key).lower() == wanted:
            nested = key
    return nested
