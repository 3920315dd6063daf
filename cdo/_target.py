"""
Source target handling for cdo.

Provides SourceTarget, the one source file an invocation builds or runs.
"""

from pathlib import Path

from ._type_check import typecheck_methods


@typecheck_methods
class SourceTarget:
    """Stores an immutable path to a source file. The file does not have to exist."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def stem(self) -> str:
        """File name without extension; names the artifact and fingerprint record."""
        return self._path.stem

    @property
    def directory(self) -> Path:
        return self._path.parent

    def exists(self) -> bool:
        return self._path.is_file()

    def __eq__(self, other):
        return isinstance(other, SourceTarget) and self._path == other._path

    def __hash__(self):
        return hash(self._path)

    def __repr__(self):
        return f"SourceTarget({str(self._path)!r})"

    def __str__(self) -> str:
        return str(self._path)
