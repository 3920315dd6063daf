"""Logging functionality for cdo invocations."""

import logging
from pathlib import Path

from ._type_check import typecheck_methods


LOG_FILE_NAME = "cdo.log"


@typecheck_methods
class CdoLogger(logging.Logger):
    """Logger for cdo invocations."""

    def __init__(self, log_dir: Path):
        """Initialize logger with file handler.
        Args:    log_dir: Directory where log file will be created"""
        super().__init__("cdo", logging.INFO)

        self.handlers.clear()

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        except OSError:
            # Read-only home directory: run without a log file
            self.addHandler(logging.NullHandler())
            return

        handler.setLevel(logging.INFO)

        # Format: timestamp - level - message
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)

        self.addHandler(handler)

    def close(self):
        """Flush and close all handlers."""
        for handler in list(self.handlers):
            handler.close()
            self.removeHandler(handler)
