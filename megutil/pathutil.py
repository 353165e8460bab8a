from __future__ import annotations

import re
from typing import Iterable, List

_DRIVE_RE = re.compile(r"^[A-Za-z]:/")


def norm_member_path(p: str) -> str:
    """Convert a member name to forward-slash form.

    Names in .meg archives are usually written with backslashes
    (``DATA\\ART\\MODELS\\x.alo``).
    """
    return p.replace("\\", "/")


def path_components(p: str) -> List[str]:
    """Split a path into components.

    Rules:
    - Backslashes count as separators
    - A leading slash becomes a "/" root component
    - Empty and '.' segments are dropped
    """
    p = norm_member_path(p)
    parts = [q for q in p.split("/") if q not in ("", ".")]
    if p.startswith("/"):
        parts.insert(0, "/")
    return parts


def matches(pattern: str, name: str) -> bool:
    """True when `pattern` names `name` itself or one of its parent directories."""
    want = path_components(pattern)
    have = path_components(name)
    return len(want) <= len(have) and have[: len(want)] == want


def match_members(pattern: str, names: Iterable[str]) -> List[str]:
    return [n for n in names if matches(pattern, n)]


def is_rooted(p: str) -> bool:
    p = norm_member_path(p)
    return p.startswith("/") or bool(_DRIVE_RE.match(p))


def escapes_root(p: str) -> bool:
    return ".." in path_components(p)
