"""Share text format.

One share per line, ``<x>:<y>`` with both sides in radix 36::

    2k1vq0e7...:1x9o4lz...
    9b3mdw0...:3c7fp2a...

Blank lines are ignored.  Lines are only checked for shape here; the
numerals themselves are validated by ``recover_secret``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from shared_secrets.config import SHARE_SEPARATOR
from shared_secrets.crypto.shamir import Share


class CorruptShareFileError(ValueError):
    """Raised when a line of a share file is not ``x:y``."""


def dumps_shares(shares: Iterable[Share]) -> str:
    return "".join(f"{x}{SHARE_SEPARATOR}{y}\n" for x, y in shares)


def loads_shares(text: str) -> List[Share]:
    shares: List[Share] = []
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        parts = line.split(SHARE_SEPARATOR)
        if len(parts) != 2:
            raise CorruptShareFileError(f"Line {lineno}: expected '<x>{SHARE_SEPARATOR}<y>'")
        x, y = parts[0].strip(), parts[1].strip()
        if not x or not y:
            raise CorruptShareFileError(f"Line {lineno}: empty share component")
        shares.append((x, y))
    return shares


def write_shares(path: Path, shares: Iterable[Share]) -> None:
    Path(path).write_text(dumps_shares(shares), encoding="utf-8")


def read_shares(path: Path) -> List[Share]:
    return loads_shares(Path(path).read_text(encoding="utf-8"))
