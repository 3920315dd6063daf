"""
Cache management for cdo.

The cache directory sits next to the source file it serves:

    <source dir>/.cdo/<stem>        compiled executable
    <source dir>/.cdo/<stem>.hash   fingerprint of the source that produced it

A record is written only after a successful compile. Whether an artifact is
up to date is decided by comparing fingerprints, never by the artifact's
mtime or existence.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from ._errors import CdoError, CdoIoError, FingerprintParseError
from ._hasher import MAX_FINGERPRINT
from ._target import SourceTarget
from ._type_check import typecheck_methods


CACHE_DIR_NAME = ".cdo"
HASH_SUFFIX = ".hash"


def parse_fingerprint(text: str, record: Path) -> int:
    """Parse the content of a fingerprint record.
    Args:    text: Raw record content (surrounding whitespace is ignored)
             record: Record path, for the error message
    Returns: The fingerprint
    Raises:  FingerprintParseError unless text is a decimal in the unsigned 64-bit range"""
    stripped = text.strip()
    # int() alone would also accept signs, underscores and non-ASCII digits
    if not (stripped.isascii() and stripped.isdigit()):
        raise FingerprintParseError(record, text)
    value = int(stripped)
    if value > MAX_FINGERPRINT:
        raise FingerprintParseError(record, text)
    return value


@typecheck_methods
class CacheStore:
    """Fingerprint records and compiled artifacts for the sources of one directory."""

    def __init__(self, cache_dir: Path, logger: logging.Logger):
        self.cache_dir = Path(cache_dir)
        self.logger = logger

    @classmethod
    def for_directory(cls, source_dir: Path, logger: logging.Logger) -> 'CacheStore':
        """Cache store serving the source files that live in source_dir."""
        return cls(Path(source_dir) / CACHE_DIR_NAME, logger)

    @classmethod
    def for_target(cls, target: SourceTarget, logger: logging.Logger) -> 'CacheStore':
        return cls.for_directory(target.directory, logger)

    def _stem(self, target: SourceTarget) -> str:
        stem = target.stem
        # foo.hash.cpp would build .cdo/foo.hash, the record of foo.cpp
        if stem.endswith(HASH_SUFFIX):
            raise CdoError(f"Cannot cache {target}: source names ending in "
                           f"'{HASH_SUFFIX}' before the extension are reserved.", target.path)
        return stem

    def artifact_path(self, target: SourceTarget) -> Path:
        """Location of the compiled executable for target. No I/O.
        Raises:  CdoError if the stem ends in .hash"""
        return self.cache_dir / self._stem(target)

    def hash_path(self, target: SourceTarget) -> Path:
        """Location of the fingerprint record for target. No I/O.
        Raises:  CdoError if the stem ends in .hash"""
        return self.cache_dir / f"{self._stem(target)}{HASH_SUFFIX}"

    def ensure_dir(self) -> bool:
        """Create the cache directory if needed.
        Returns: True if it was created by this call"""
        if self.cache_dir.is_dir():
            return False
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CdoIoError.from_os_error("create cache directory", self.cache_dir, e) from e
        self.logger.info(f"Created cache directory {self.cache_dir}")
        return True

    def read_fingerprint(self, target: SourceTarget) -> Optional[int]:
        """Fingerprint stored by the last successful build of target.
        Returns: The fingerprint, or None if there is no record or the record is corrupt"""
        record = self.hash_path(target)
        try:
            text = record.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError:
            self.logger.warning(f"Corrupt fingerprint record {record}: not text, forcing rebuild")
            return None
        except OSError as e:
            raise CdoIoError.from_os_error("read", record, e) from e

        try:
            return parse_fingerprint(text, record)
        except FingerprintParseError as e:
            self.logger.warning(f"{e}, forcing rebuild")
            return None

    def write_fingerprint(self, target: SourceTarget, fingerprint: int):
        """Persist fingerprint for target, replacing any previous record.
        Only call after the compiler reported success."""
        if not 0 <= fingerprint <= MAX_FINGERPRINT:
            raise ValueError(f"Fingerprint out of range: {fingerprint}")
        self.ensure_dir()
        record = self.hash_path(target)
        try:
            record.write_text(str(fingerprint), encoding="utf-8")
        except OSError as e:
            raise CdoIoError.from_os_error("write", record, e) from e

    def delete_all(self) -> bool:
        """Remove the cache directory and everything in it.
        Returns: True if something was deleted, False if there was no cache directory"""
        if not self.cache_dir.exists():
            return False
        # Logged first: the log file may live in a directory we are about to remove
        self.logger.info(f"Deleting cache directory {self.cache_dir}")
        try:
            shutil.rmtree(self.cache_dir)
        except OSError as e:
            raise CdoIoError.from_os_error("delete", self.cache_dir, e) from e
        return True
