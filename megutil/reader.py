from __future__ import annotations

import io
import logging
from typing import BinaryIO, Dict, List, Optional

from .constants import COPY_CHUNK_SIZE
from .errors import ArchiveOpenError, ExtractIOError, NoSuchFile
from .header import Header, read_header
from .source import ByteSource
from .tables import MemberRecord, read_file_table, read_name_table


logger = logging.getLogger(__name__)


def _write_all(dest: BinaryIO, buf: bytes) -> None:
    # Raw streams may accept only part of a buffer; a None count means the
    # sink does not report one and took everything.
    view = memoryview(buf)
    while view:
        n = dest.write(view)
        if n is None:
            return
        if n <= 0:
            raise OSError("destination accepted no bytes")
        view = view[n:]


class MegArchive:
    """An index over a .meg archive plus the byte source it was read from.

    The archive owns `source` from construction on: it is closed by close()
    and by a failed parse. Every extraction moves the source's cursor, so one
    instance must not be used from several threads at once.
    """

    def __init__(self, source: ByteSource):
        self.source: Optional[ByteSource] = source
        self.header: Optional[Header] = None
        self.files: Dict[str, MemberRecord] = {}
        try:
            self._load_index()
        except ArchiveOpenError:
            self.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __contains__(self, name: str) -> bool:
        return name in self.files

    def __len__(self) -> int:
        return len(self.files)

    def close(self):
        if self.source is not None:
            self.source.close()
            self.source = None

    def filenames(self) -> List[str]:
        return list(self.files)

    def member(self, name: str) -> MemberRecord:
        try:
            return self.files[name]
        except KeyError:
            raise NoSuchFile(name) from None

    def extract(self, name: str, dest: BinaryIO) -> None:
        """Copy exactly the bytes of member `name` into `dest`.

        Raises NoSuchFile before touching the source or `dest` when `name` is
        unknown. A source that ends before the member's declared size is an
        ExtractIOError; bytes already copied stay written.
        """
        rec = self.member(name)
        if self.source is None:
            raise ExtractIOError(ValueError("archive is closed"))
        logger.debug("extract %s: start=%d size=%d", name, rec.start, rec.size)
        try:
            self.source.seek(rec.start)
            remaining = rec.size
            while remaining:
                buf = self.source.read(min(COPY_CHUNK_SIZE, remaining))
                if not buf:
                    raise EOFError(
                        f"archive ended {remaining} byte(s) before the end of {name}"
                    )
                _write_all(dest, buf)
                remaining -= len(buf)
        except (OSError, EOFError) as exc:
            raise ExtractIOError(exc) from exc

    def read(self, name: str) -> bytes:
        out = io.BytesIO()
        self.extract(name, out)
        return out.getvalue()

    def extract_to_path(self, name: str, out_path: str) -> None:
        rec = self.member(name)
        try:
            wf = open(out_path, "wb")
        except OSError as exc:
            raise ExtractIOError(exc) from exc
        with wf:
            self.extract(name, wf)
        logger.debug("wrote %d byte(s) to %s", rec.size, out_path)

    # internals
    def _load_index(self):
        assert self.source is not None
        self.header = read_header(self.source)
        names = read_name_table(self.source, self.header.numfiles, self.header.name_tab_size)
        self.files = read_file_table(self.source, self.header.numfiles, names)


def open_archive(source: ByteSource) -> MegArchive:
    return MegArchive(source)


def list_names(archive: MegArchive) -> List[str]:
    return archive.filenames()


def extract(archive: MegArchive, name: str, dest: BinaryIO) -> None:
    archive.extract(name, dest)
