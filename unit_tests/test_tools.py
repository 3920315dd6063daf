#!/usr/bin/env python3
"""Unit tests for the external tool wrappers."""
import os
from pathlib import Path

import pytest

from cdo import CdoIoError
from cdo._tools import Compiler, ProgramRunner

posix_only = pytest.mark.skipif(os.name == "nt", reason="uses /bin/sh scripts")


def write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


class TestCompiler:
    """Tests for Compiler."""

    def test_build_command(self, logger):
        compiler = Compiler("clang++", logger)
        assert compiler.build_command(Path("a.cpp"), Path(".cdo/a")) == ["clang++", "a.cpp", "-o", str(Path(".cdo/a"))]

    def test_missing_compiler_raises_io_error(self, logger, tmp_path):
        compiler = Compiler(str(tmp_path / "no-such-compiler"), logger)
        with pytest.raises(CdoIoError):
            compiler(tmp_path / "a.cpp", tmp_path / "a")

    @posix_only
    def test_captures_output_and_status(self, logger, tmp_path):
        fake = write_script(tmp_path / "fakecc", 'echo "compiling $1"\necho "oops" >&2\nexit 4\n')
        result = Compiler(str(fake), logger)(tmp_path / "a.cpp", tmp_path / "a")
        assert result.stdout == f"compiling {tmp_path / 'a.cpp'}\n"
        assert result.stderr == "oops\n"
        assert result.returncode == 4
        assert not result.succeeded

    @posix_only
    def test_passes_output_path(self, logger, tmp_path):
        fake = write_script(tmp_path / "fakecc", 'touch "$3"\n')
        result = Compiler(str(fake), logger)(tmp_path / "a.cpp", tmp_path / "out")
        assert result.succeeded
        assert (tmp_path / "out").exists()


class TestProgramRunner:
    """Tests for ProgramRunner."""

    @posix_only
    def test_returns_exit_code(self, logger, tmp_path):
        program = write_script(tmp_path / "prog", "exit 3\n")
        assert ProgramRunner(logger)(program) == 3

    def test_missing_program_raises_io_error(self, logger, tmp_path):
        with pytest.raises(CdoIoError):
            ProgramRunner(logger)(tmp_path / "missing")
