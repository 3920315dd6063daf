"""
Command dispatch for cdo.

    help    print usage
    clean   delete the cache directory
    build   compile the target if its content changed
    run     build, then execute the compiled program (the default)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ._builder import BuildOrchestrator, BuildResult
from ._cache import CACHE_DIR_NAME, CacheStore
from ._config import CdoConfig
from ._context import InvocationContext
from ._errors import CdoError, CdoIoError
from ._locator import SourceLocator
from ._target import SourceTarget
from ._tools import Compiler, ProgramRunner
from ._type_check import typecheck_methods


USAGE = """\
Usage: cdo [command] [source_file]

Commands:
  build       Compiles the specified C++ source file or the one with a main function found in the current directory.
  run         Builds if needed, then executes the compiled binary. This is the default command.
  clean       Removes the cache directory holding compiled binaries and hash files.
  help        Displays this help message.

If no source file is provided, the program looks for a C++ file with a main function in the current directory.
Compiled binaries are placed in a '.cdo' directory next to the source file."""


@typecheck_methods
class CommandRouter:
    """Dispatches one invocation. Holds no state beyond what the cache directory stores."""

    def __init__(self, context: InvocationContext, logger: logging.Logger,
                 compiler: Optional[Compiler] = None, runner: Optional[ProgramRunner] = None):
        """Args:    context: Command, path and directories of this invocation
                    logger: Logger for the invocation
                    compiler: Compiler to use (defaults to the one configured in tools.json)
                    runner: Program runner (defaults to running in the foreground)"""
        self.context = context
        self.logger = logger
        self.locator = SourceLocator(logger)
        self._compiler = compiler
        self.runner = runner if runner is not None else ProgramRunner(logger)

    @property
    def compiler(self) -> Compiler:
        """Compiler, created from tools.json on first use."""
        if self._compiler is None:
            config = CdoConfig(self.context.data_dir, self.logger)
            self._compiler = Compiler(config.compiler_path, self.logger)
        return self._compiler

    def dispatch(self) -> int:
        """Run the command of the context.
        Returns: Exit status: 1 if a build or file operation failed, 0 otherwise"""
        command = self.context.command
        self.logger.info(f"Invocation: {self.context!r}")

        handlers = {
            "help": self.cmd_help,
            "clean": self.cmd_clean,
            "build": self.cmd_build,
            "run": self.cmd_run,
        }
        handler = handlers.get(command)
        if handler is None:
            print(f"Unknown command: {command}. Use 'build', 'run', or 'clean'.", file=sys.stderr)
            return 0

        try:
            return handler()
        except CdoError as e:
            self.logger.error(f"{command} failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1

    def cmd_help(self) -> int:
        print(USAGE)
        return 0

    def cmd_clean(self) -> int:
        cache_dir = self._source_dir() / CACHE_DIR_NAME
        if self._cache_store(cache_dir).delete_all():
            print(f"Deleted cdo directory: {cache_dir}")
        else:
            print("No cdo directory found to delete.")
        return 0

    def cmd_build(self) -> int:
        target = self._resolve_target()
        if target is None:
            return 0
        self._build(target)
        return 0

    def cmd_run(self) -> int:
        target = self._resolve_target()
        if target is None:
            return 0
        result = self._build(target)

        # A record can outlive its artifact if someone deletes the binary by hand
        if not result.artifact.is_file():
            raise CdoIoError(f"Compiled program not found: {result.artifact}. "
                             f"Run 'cdo clean' to force a rebuild.", result.artifact)

        # The program writes straight to our file descriptors
        sys.stdout.flush()
        sys.stderr.flush()
        returncode = self.runner(result.artifact)
        if returncode != 0:
            self.logger.info(f"Program {result.artifact} exited with {returncode}")
            print("\nC++ program failed to run.")
        return 0

    def _source_dir(self) -> Path:
        """Directory whose cache an invocation touches: the parent of the explicit path, else cwd."""
        if self.context.path is not None:
            return (self.context.cwd / self.context.path).parent
        return self.context.cwd

    def _cache_store(self, cache_dir: Path) -> CacheStore:
        """Cache store for cache_dir, unless that is where tools.json and cdo.log live."""
        if _same_path(cache_dir, self.context.data_dir):
            raise CdoIoError(f"Refusing to use {cache_dir} as a cache directory: it is the cdo data "
                             f"directory. Point CDO_HOME somewhere else.", cache_dir)
        return CacheStore(cache_dir, self.logger)

    def _resolve_target(self) -> Optional[SourceTarget]:
        target = self.locator.resolve(self.context.path, self.context.cwd)
        if target is None:
            print(f"You used the \"{self.context.command}\" command without an available path, "
                  f"either provide one or go to the correct directory.", file=sys.stderr)
        return target

    def _build(self, target: SourceTarget) -> BuildResult:
        cache = self._cache_store(target.directory / CACHE_DIR_NAME)
        return BuildOrchestrator(cache, self.compiler, self.logger).ensure_built(target)


def _same_path(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return a.absolute() == b.absolute()
