"""
Tool configuration for cdo.

tools.json in the data directory maps tool names to executables, e.g.
    {"compiler": "clang++", "clang++": "/usr/bin/clang++"}
Every key is optional.
"""

import json
import logging
from pathlib import Path
from typing import Dict

from ._type_check import typecheck_methods


DEFAULT_COMPILER = "clang++"
CONFIG_FILE_NAME = "tools.json"


@typecheck_methods
class CdoConfig:
    """Lazily loaded tools.json."""

    def __init__(self, data_dir: Path, logger: logging.Logger):
        self.config_file = Path(data_dir) / CONFIG_FILE_NAME
        self.logger = logger
        self._data = None

    def _load(self) -> Dict:
        """Load configuration from tools.json (lazy, cached).
        A missing file means defaults. A corrupt file is logged and ignored."""
        if self._data is not None:
            return self._data

        try:
            with open(self.config_file, 'r', encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            data = {}
        except (OSError, json.JSONDecodeError) as e:
            self.logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")
            data = {}

        if not isinstance(data, dict):
            self.logger.warning(f"Ignoring config {self.config_file}: expected a JSON object")
            data = {}

        self._data = data
        return self._data

    @property
    def compiler_name(self) -> str:
        return str(self._load().get("compiler", DEFAULT_COMPILER))

    def tool_path(self, tool_name: str) -> str:
        """Executable for tool_name, falling back to the bare name (looked up on PATH)."""
        return str(self._load().get(tool_name, tool_name))

    @property
    def compiler_path(self) -> str:
        return self.tool_path(self.compiler_name)
