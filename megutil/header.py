from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import FLAGS_ENCRYPTED, FLAGS_NOCRYPT, MEG_MAGIC, U32_STRUCT
from .errors import ArchiveIOError, EncryptedArchive, MalformedArchive
from .source import ByteSource, read_exact


logger = logging.getLogger(__name__)


@dataclass
class Header:
    flags: int
    magic: int
    data_offset: int
    numfiles: int
    name_tab_size: int


def read_u32(f: ByteSource) -> int:
    try:
        return U32_STRUCT.unpack(read_exact(f, U32_STRUCT.size))[0]
    except (OSError, EOFError) as exc:
        raise ArchiveIOError(exc) from exc


def read_header(f: ByteSource) -> Header:
    """Read and validate the fixed archive header from offset 0.

    Fields are read one at a time and checked as soon as they are known, so a
    truncated encrypted archive still reports EncryptedArchive rather than an
    I/O error.
    """
    try:
        f.seek(0)
    except OSError as exc:
        raise ArchiveIOError(exc) from exc
    flags = read_u32(f)
    magic = read_u32(f)
    if flags == FLAGS_ENCRYPTED:
        raise EncryptedArchive()
    if flags != FLAGS_NOCRYPT:
        raise MalformedArchive(f"unexpected header flags 0x{flags:08X}")
    if magic != MEG_MAGIC:
        raise MalformedArchive(f"bad magic 0x{magic:08X}")
    data_offset = read_u32(f)
    numfiles = read_u32(f)
    if numfiles != read_u32(f):
        raise MalformedArchive("file count mismatch")
    name_tab_size = read_u32(f)
    logger.debug("header: numfiles=%d name_tab_size=%d data_offset=%d", numfiles, name_tab_size, data_offset)
    return Header(
        flags=flags,
        magic=magic,
        data_offset=data_offset,
        numfiles=numfiles,
        name_tab_size=name_tab_size,
    )
