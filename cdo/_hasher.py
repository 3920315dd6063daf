"""
Content fingerprints for change detection.

A fingerprint is the 64-bit BLAKE2b digest of a file's raw bytes, read as an
unsigned big-endian integer. Any byte change, whitespace included, yields a
new fingerprint.
"""

import hashlib
from pathlib import Path

from ._errors import CdoIoError


FINGERPRINT_BITS = 64
MAX_FINGERPRINT = (1 << FINGERPRINT_BITS) - 1


def hash_bytes(data: bytes) -> int:
    """Fingerprint of an in-memory byte sequence."""
    digest = hashlib.blake2b(data, digest_size=FINGERPRINT_BITS // 8).digest()
    return int.from_bytes(digest, "big")


def hash_file(path: Path) -> int:
    """Fingerprint of the whole content of the file at path.
    Raises:  CdoIoError if the file cannot be opened or read"""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise CdoIoError.from_os_error("read", path, e) from e
    return hash_bytes(data)
