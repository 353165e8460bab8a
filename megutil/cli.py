from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import BinaryIO, List, Optional

from megutil import __version__
from megutil.errors import ArchiveOpenError, ExtractionError
from megutil.pathutil import escapes_root, is_rooted, match_members, norm_member_path
from megutil.reader import MegArchive
from megutil.source import open_source


PROG = "megutil"


def _warn(msg: str) -> None:
    print(f"{PROG}: {msg}", file=sys.stderr)


def _open(archive: Optional[str], stdin: Optional[BinaryIO] = None) -> MegArchive:
    """Open `archive` (or stdin when None) and build its index.

    OSError from opening the source propagates unchanged; parse failures
    raise ArchiveOpenError.
    """
    return MegArchive(open_source(archive, stdin=stdin))


def select_members(arc: MegArchive, patterns: List[str]) -> List[str]:
    """Resolve user patterns to member names, in archive order per pattern.

    Args:
        arc: Open archive.
        patterns: Path patterns; an empty list selects every member.

    Returns:
        Matching names without duplicates. Patterns that match nothing are
        reported on stderr and otherwise ignored.
    """
    names = arc.filenames()
    if not patterns:
        return names
    selected: List[str] = []
    seen = set()
    for pat in patterns:
        hits = match_members(pat, names)
        if not hits:
            _warn(f"{pat} not found in archive")
        for name in hits:
            if name not in seen:
                seen.add(name)
                selected.append(name)
    return selected


def cmd_list(archive: Optional[str], patterns: Optional[List[str]] = None, *, stdin: Optional[BinaryIO] = None) -> bool:
    with _open(archive, stdin=stdin) as arc:
        for name in select_members(arc, patterns or []):
            print(name)
    return True


def cmd_extract(
    archive: Optional[str],
    patterns: Optional[List[str]] = None,
    *,
    outdir: str = ".",
    force: bool = False,
    verbose: bool = False,
    stdin: Optional[BinaryIO] = None,
) -> bool:
    """Extract selected members below `outdir`.

    Members with rooted paths, or paths containing '..', are skipped unless
    `force` is set. Returns False if an output directory or file could not be
    created; extraction errors propagate.
    """
    with _open(archive, stdin=stdin) as arc:
        for name in select_members(arc, patterns or []):
            rel = norm_member_path(name)
            if not force:
                if is_rooted(rel):
                    _warn(f"skipping {name}: path is absolute (use -F to force extraction)")
                    continue
                if escapes_root(rel):
                    _warn(f"skipping {name}: path leaves the output directory (use -F to force extraction)")
                    continue
            dst = os.path.join(outdir, rel)
            parent = os.path.dirname(dst)
            if parent:
                try:
                    os.makedirs(parent, exist_ok=True)
                except OSError as exc:
                    _warn(f"could not create {parent}: {exc}")
                    return False
            arc.extract_to_path(name, dst)
            if verbose:
                print(dst)
    return True


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(prog=PROG, description="manipulate Petroglyph .meg archives")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-f", "--file", dest="archive", help=".meg archive to use (default stdin)")
    ap.add_argument("-v", "--verbose", action="store_true", help="print each extracted path")
    ap.add_argument("-F", "--force", action="store_true", help="extract files with rooted paths (dangerous)")
    ap.add_argument("-C", "--outdir", default=".", help="directory to extract into (default: .)")
    ap.add_argument("--debug", action="store_true", help="log parser and extraction details to stderr")
    action = ap.add_mutually_exclusive_group(required=True)
    action.add_argument("-x", "--extract", action="store_true", help="extract all (or selected) files in archive")
    action.add_argument("-t", "--list", action="store_true", help="list contents of archive")
    ap.add_argument("files", nargs="*", metavar="FILES", help="archive paths (or leading directories) to operate on")

    args = ap.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    try:
        if args.extract:
            ok = cmd_extract(args.archive, args.files, outdir=args.outdir, force=args.force, verbose=args.verbose)
        else:
            ok = cmd_list(args.archive, args.files)
    except ArchiveOpenError as e:
        _warn(f"could not read archive: {e}")
        sys.exit(1)
    except ExtractionError as e:
        _warn(f"error during extraction: {e}")
        sys.exit(1)
    except OSError as e:
        _warn(f"error opening archive: {e}")
        sys.exit(1)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
