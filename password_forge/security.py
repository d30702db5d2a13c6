"""Security utilities: password redaction, output permission checks, log fingerprints.

Generated passwords never reach the generation log; only fingerprints do.
"""

from __future__ import annotations

import hashlib
import os
import stat
from enum import Enum
from pathlib import Path


class RedactionLevel(Enum):
    """Redaction levels control how much of a password is visible."""
    NONE = "none"         # raw value
    PARTIAL = "partial"   # first two and last two characters
    FULL = "full"         # [REDACTED]
    HASH = "hash"         # [sha256:abcd1234]


def is_redirected_path(path: Path) -> bool:
    """True if writing to path would land somewhere other than path itself.

    Catches a symlinked target, a symlinked parent directory, and `..`
    segments in an existing path. Hardlinks are not detected.
    """
    if path.is_symlink():
        return True
    if not path.exists():
        return False
    try:
        return path.resolve(strict=True) != path.absolute()
    except OSError:
        return True


def check_output_permissions(path: Path, force: bool = False) -> bool:
    """Return True if safe to write. Refuses symlinks. Refuses world-readable unless forced."""
    if is_redirected_path(path):
        return False
    # A new file is only as private as the directory it lands in
    target = path if path.exists() else path.parent
    if not target.exists():
        return True
    world_readable = bool(os.stat(target).st_mode & stat.S_IROTH)
    return force or not world_readable


def fingerprint(text: str) -> str:
    """Short non-reversible identifier for log lines."""
    # surrogatepass: custom characters may carry lone surrogates from undecodable argv bytes
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()[:12]


def redact_password(text: str, level: RedactionLevel | str = RedactionLevel.PARTIAL) -> str:
    """Redact a password at the specified level."""
    level = RedactionLevel(level)
    if level == RedactionLevel.NONE:
        return text
    if level == RedactionLevel.FULL:
        return "[REDACTED]"
    if level == RedactionLevel.HASH:
        return f"[sha256:{fingerprint(text)}]"
    # PARTIAL
    if len(text) <= 8:
        return "*" * len(text)
    return f"{text[:2]}{'*' * (len(text) - 4)}{text[-2:]}"
