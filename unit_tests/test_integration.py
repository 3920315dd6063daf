#!/usr/bin/env python3
"""Build and run a real C++ program. Skipped when clang++ is not installed."""
import shutil

import pytest

from cdo import CommandRouter, InvocationContext
from cdo._tools import Compiler, ProgramRunner

from conftest import HELLO_CPP, HELLO_CPP_V2

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("clang++") is None, reason="clang++ not installed"),
]


def dispatch(command, project_dir, data_dir, logger):
    context = InvocationContext(command, None, project_dir, data_dir)
    return CommandRouter(context, logger, Compiler("clang++", logger), ProgramRunner(logger)).dispatch()


def test_build_run_rebuild(project_dir, data_dir, logger, capfd):
    source = project_dir / "hello.cpp"
    source.write_text(HELLO_CPP)

    assert dispatch("run", project_dir, data_dir, logger) == 0
    out = capfd.readouterr().out
    assert "Compiled" in out
    assert "Hello, World!" in out

    assert dispatch("run", project_dir, data_dir, logger) == 0
    out = capfd.readouterr().out
    assert "Compiled" not in out
    assert "Hello, World!" in out

    source.write_text(HELLO_CPP_V2)
    assert dispatch("run", project_dir, data_dir, logger) == 0
    out = capfd.readouterr().out
    assert "Compiled" in out
    assert "Hello again!" in out


def test_syntax_error_reported(project_dir, data_dir, logger, capfd):
    (project_dir / "broken.cpp").write_text("int main() { return }\n")
    assert dispatch("build", project_dir, data_dir, logger) == 1
    assert "Failed to compile" in capfd.readouterr().err
    assert not (project_dir / ".cdo" / "broken.hash").exists()
