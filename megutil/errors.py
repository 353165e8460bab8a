from __future__ import annotations

from typing import Optional


class MegError(Exception):
    """Base class for megutil errors."""


# Raised while building the archive index
class ArchiveOpenError(MegError):
    pass


class ArchiveIOError(ArchiveOpenError):
    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(str(cause) if cause is not None else "I/O error while reading archive")


class MalformedArchive(ArchiveOpenError):
    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        msg = "File is not a valid archive."
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class EncryptedArchive(ArchiveOpenError):
    def __init__(self):
        super().__init__("Archive is encrypted")


# Raised while extracting a member
class ExtractionError(MegError):
    pass


class ExtractIOError(ExtractionError):
    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(str(cause) if cause is not None else "I/O error during extraction")


class NoSuchFile(ExtractionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"file {name} not present in archive")
