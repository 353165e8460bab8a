from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from .constants import FILE_ENTRY_STRUCT, FILE_FLAG_ENCRYPTED, FILE_FLAGS_STRUCT, NAME_LEN_STRUCT
from .errors import ArchiveIOError, EncryptedArchive, MalformedArchive
from .source import ByteSource, read_exact


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberRecord:
    size: int
    start: int


def _read(f: ByteSource, n: int) -> bytes:
    try:
        return read_exact(f, n)
    except (OSError, EOFError) as exc:
        raise ArchiveIOError(exc) from exc


def read_name_table(f: ByteSource, numfiles: int, name_tab_size: int) -> List[str]:
    """Read `numfiles` length-prefixed UTF-8 names.

    The running total of name bytes is checked against `name_tab_size` after
    every entry, so a corrupt count cannot drive reads past the declared table.
    """
    names: List[str] = []
    consumed = 0
    for i in range(numfiles):
        (name_len,) = NAME_LEN_STRUCT.unpack(_read(f, NAME_LEN_STRUCT.size))
        raw = _read(f, name_len)
        try:
            name = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedArchive(f"name {i} is not valid UTF-8") from exc
        consumed += name_len
        if consumed > name_tab_size:
            raise MalformedArchive("name table exceeds declared size")
        names.append(name)
    logger.debug("name table: %d names, %d bytes", len(names), consumed)
    return names


def read_file_table(f: ByteSource, numfiles: int, names: List[str]) -> Dict[str, MemberRecord]:
    files: Dict[str, MemberRecord] = {}
    for _ in range(numfiles):
        (flags,) = FILE_FLAGS_STRUCT.unpack(_read(f, FILE_FLAGS_STRUCT.size))
        if flags & FILE_FLAG_ENCRYPTED:
            raise EncryptedArchive()
        _crc, _idx, size, start, name_index = FILE_ENTRY_STRUCT.unpack(_read(f, FILE_ENTRY_STRUCT.size))
        if name_index >= len(names):
            raise MalformedArchive(f"name index {name_index} out of range")
        # Duplicate names: last entry wins
        files[names[name_index]] = MemberRecord(size=size, start=start)
    logger.debug("file table: %d entries, %d distinct names", numfiles, len(files))
    return files
