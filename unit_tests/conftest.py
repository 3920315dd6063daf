"""
Pytest configuration for cdo unit tests.

Features:
- Adds parent directory to Python path so tests can import the cdo package
- Provides a project directory, data directory and logger per test
- Provides fake tools: a compiler that counts invocations and a runner that records them
"""
import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to Python path so we can import cdo
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from cdo import CommandRouter, InvocationContext
from cdo._tools import Compiler, ProgramRunner, ToolRunResult


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "pedantic: pedantic tests that verify edge cases (can be skipped with -m 'not pedantic')"
    )
    config.addinivalue_line(
        "markers", "integration: tests that call a real C++ compiler"
    )


HELLO_CPP = """
#include <iostream>

int main() {
    std::cout << "Hello, World!" << std::endl;
    return 0;
}
"""

HELLO_CPP_V2 = """
#include <iostream>

int main() {
    std::cout << "Hello again!" << std::endl;
    return 0;
}
"""

HELPER_CPP = """
int add(int a, int b) { return a + b; }
"""


class CountingCompiler(Compiler):
    """Fake compiler: writes a stub executable and records every invocation."""

    def __init__(self, logger, returncode: int = 0, stdout: str = "", stderr: str = ""):
        super().__init__("fake-clang++", logger)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, source, output):
        self.calls.append((Path(source), Path(output)))
        if self.returncode == 0:
            Path(output).write_text("#!/bin/sh\nexit 0\n")
            Path(output).chmod(0o755)
        return ToolRunResult(self.stdout, self.stderr, self.returncode)

    @property
    def count(self) -> int:
        return len(self.calls)


class RecordingRunner(ProgramRunner):
    """Fake program runner: records executables instead of running them."""

    def __init__(self, logger, returncode: int = 0):
        super().__init__(logger)
        self.returncode = returncode
        self.calls = []

    def __call__(self, executable):
        self.calls.append(Path(executable))
        return self.returncode


@pytest.fixture
def logger():
    """Logger that keeps records in memory (caplog can capture them)."""
    return logging.getLogger("cdo.test")


@pytest.fixture
def project_dir(tmp_path):
    """Empty directory acting as the user's working directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def data_dir(tmp_path):
    """Data directory (tools.json, cdo.log) kept out of the real home directory."""
    return tmp_path / "cdo_home"


@pytest.fixture
def compiler(logger):
    return CountingCompiler(logger)


@pytest.fixture
def runner(logger):
    return RecordingRunner(logger)


@pytest.fixture
def make_router(project_dir, data_dir, logger, compiler, runner):
    """Factory for a CommandRouter running in project_dir with the fake tools."""

    def _make(command: str = "run", path: str = None, cwd: Path = None,
              compiler_override=None, runner_override=None) -> CommandRouter:
        context = InvocationContext(command, path, cwd or project_dir, data_dir)
        return CommandRouter(context, logger,
                             compiler=compiler_override or compiler,
                             runner=runner_override or runner)

    return _make
