"""Archive and image I/O utilities."""

from wsz_kit.io.archive import (
    SkinArchive,
    entry_basename,
    find_entry,
    read_archive,
    read_archive_bytes,
    write_archive,
)
from wsz_kit.io.images import decode_image, encode_image, load_image, save_image

__all__ = [
    "SkinArchive",
    "decode_image",
    "encode_image",
    "entry_basename",
    "find_entry",
    "load_image",
    "read_archive",
    "read_archive_bytes",
    "save_image",
    "write_archive",
]
