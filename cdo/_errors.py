"""
Error types for cdo.

Every failure that can end an invocation is a CdoError. The underlying
exception, when there is one, is chained as __cause__.
"""

from pathlib import Path
from typing import Optional


class CdoError(Exception):
    """Base class for cdo failures."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class CdoIoError(CdoError):
    """A file or directory could not be found, read, written or removed."""

    @classmethod
    def from_os_error(cls, action: str, path: Path, err: OSError) -> 'CdoIoError':
        """Wrap an OSError raised while performing `action` on `path`.
        Use with `raise ... from err` to keep the original error reachable."""
        reason = err.strerror or str(err)
        return cls(f"Failed to {action} {path}: {reason}", path)


class CompileError(CdoError):
    """The compiler ran and reported failure."""

    def __init__(self, source: Path, returncode: int):
        super().__init__(f"Failed to compile {source} (exit status {returncode}).", source)
        self.returncode = returncode


class FingerprintParseError(CdoError):
    """A fingerprint record does not hold an unsigned 64-bit decimal number."""

    def __init__(self, path: Path, text: str):
        super().__init__(f"Corrupt fingerprint record {path}: {text!r}", path)
        self.text = text
