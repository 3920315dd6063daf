"""
External tool wrappers for cdo.

Compiler runs the configured C++ compiler on one source file. ProgramRunner
runs a compiled executable with the terminal attached.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from ._errors import CdoIoError
from ._type_check import typecheck_methods


@typecheck_methods
class ToolRunResult:
    """Result of running a tool command."""

    def __init__(self, stdout: str, stderr: str, returncode: int):
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@typecheck_methods
class Compiler:
    """C++ compiler command: <tool> <source> -o <output>."""

    def __init__(self, tool_path: str, logger: logging.Logger):
        self.tool_path = tool_path
        self.logger = logger

    def build_command(self, source: Path, output: Path) -> List[str]:
        """Build complete command for execution.
        Source file goes before -o, as clang++ and g++ expect."""
        return [self.tool_path, str(source), "-o", str(output)]

    def __call__(self, source: Path, output: Path) -> ToolRunResult:
        """Compile source into the executable output. Blocks until the compiler exits.
        Raises:  CdoIoError if the compiler cannot be started"""
        cmd = self.build_command(source, output)
        self.logger.info(f"Running compiler: {cmd}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise CdoIoError.from_os_error("execute compiler", Path(self.tool_path), e) from e
        return ToolRunResult(result.stdout, result.stderr, result.returncode)


class ProgramRunner:
    """Runs a compiled program in the foreground, sharing our stdin/stdout/stderr."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def __call__(self, executable: Path) -> int:
        """Run executable and wait for it.
        Returns: Program exit code
        Raises:  CdoIoError if the program cannot be started"""
        self.logger.info(f"Running program: {executable}")
        try:
            result = subprocess.run([str(executable)])
        except OSError as e:
            raise CdoIoError.from_os_error("execute", executable, e) from e
        return result.returncode
