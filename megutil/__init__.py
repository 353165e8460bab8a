"""
megutil: read and extract Petroglyph .meg archives.

A .meg file is a flat container: a fixed header, a table of member names, a
table of (size, offset) records, then the raw member bytes. This package
provides:

- An index builder that validates the header and both tables (MegArchive)
- Seek-and-copy extraction of single members to any writable stream
- Classified errors: malformed vs. encrypted archives vs. I/O failures
- A small tar-like CLI (megutil -t / megutil -x)

Encrypted archives are detected and refused; writing archives is not supported.
"""

__version__ = "0.1"

from .errors import (
    MegError,
    ArchiveOpenError,
    ArchiveIOError,
    MalformedArchive,
    EncryptedArchive,
    ExtractionError,
    ExtractIOError,
    NoSuchFile,
)
from .reader import MegArchive, open_archive, list_names, extract
from .source import ByteSource, open_source
from .tables import MemberRecord

__all__ = [
    "MegArchive",
    "MemberRecord",
    "ByteSource",
    "open_archive",
    "open_source",
    "list_names",
    "extract",
    "MegError",
    "ArchiveOpenError",
    "ArchiveIOError",
    "MalformedArchive",
    "EncryptedArchive",
    "ExtractionError",
    "ExtractIOError",
    "NoSuchFile",
]
