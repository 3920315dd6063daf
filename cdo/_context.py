"""
Invocation context for cdo.

Captures the parts of the process environment an invocation depends on, so
that nothing below the entry point reads sys.argv, the working directory or
environment variables on its own.
"""

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ._type_check import typecheck_methods


DEFAULT_COMMAND = "run"
DATA_DIR_ENV_VAR = "CDO_HOME"


def default_data_dir(environ: Mapping[str, str]) -> Path:
    """Directory holding tools.json and cdo.log (~/.config/cdo unless CDO_HOME is set).
    Never named .cdo, so it cannot coincide with the cache directory of the home directory."""
    override = environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "cdo"


@typecheck_methods
class InvocationContext:
    """Command, optional source path, working directory and data directory of one invocation."""

    def __init__(self, command: str, path: Optional[str], cwd: Path, data_dir: Path):
        self._command = command
        self._path = path
        self._cwd = Path(cwd)
        self._data_dir = Path(data_dir)

    @classmethod
    def from_process(cls, command: Optional[str], path: Optional[str],
                     environ: Optional[Dict[str, str]] = None) -> 'InvocationContext':
        """Build the context for the running process from already-parsed arguments."""
        environ = os.environ if environ is None else environ
        return cls(command or DEFAULT_COMMAND, path, Path.cwd(), default_data_dir(environ))

    @property
    def command(self) -> str:
        return self._command

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def cwd(self) -> Path:
        return self._cwd

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def args(self) -> List[str]:
        return [self._command] + ([self._path] if self._path is not None else [])

    def __repr__(self):
        return f"InvocationContext(args={self.args!r}, cwd={str(self._cwd)!r})"
