"""
Source discovery for cdo.

Finds the source file to build when none is named on the command line.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from ._target import SourceTarget
from ._type_check import typecheck_methods


SOURCE_EXTENSION = ".cpp"
ENTRY_POINT_MARKER = "int main"


@typecheck_methods
class SourceLocator:
    """Resolves the source target of an invocation."""

    def __init__(self, logger: logging.Logger, extension: str = SOURCE_EXTENSION,
                 marker: str = ENTRY_POINT_MARKER):
        self.logger = logger
        self.extension = extension
        self.marker = marker

    def candidates(self, search_root: Path) -> List[Path]:
        """All files directly in search_root with the source extension whose text
        contains the entry-point marker, sorted by name.
        Unreadable files are skipped. An unreadable search_root yields no candidates."""
        try:
            entries = sorted(Path(search_root).iterdir())
        except OSError:
            return []

        found = []
        for entry in entries:
            if entry.suffix != self.extension or not entry.is_file():
                continue
            try:
                contents = entry.read_text(encoding="utf-8", errors="ignore")
            except OSError:
                continue
            if self.marker in contents:
                found.append(entry)
        return found

    def resolve(self, explicit_path: Optional[str], search_root: Path) -> Optional[SourceTarget]:
        """Pick the source target.
        Args:    explicit_path: Path given on the command line, used as is (relative to
                                search_root when not absolute). Existence is not checked here.
                 search_root: Directory to scan when no explicit path is given
        Returns: SourceTarget, or None if nothing was given and nothing was found"""
        if explicit_path is not None:
            return SourceTarget(Path(search_root) / explicit_path)

        found = self.candidates(search_root)
        if not found:
            self.logger.info(f"No {self.extension} file containing '{self.marker}' in {search_root}")
            return None

        if len(found) > 1:
            names = ", ".join(f.name for f in found)
            self.logger.warning(f"Several entry points in {search_root}: {names}; using {found[0].name}")
            print(f"Warning: found several files containing '{self.marker}' ({names}). "
                  f"Using {found[0].name}; pass a path to pick another.", file=sys.stderr)

        self.logger.info(f"Discovered source file {found[0]}")
        return SourceTarget(found[0])
