"""
Incremental build decision for cdo.

A target is compiled if and only if its current fingerprint differs from the
one recorded by its last successful build, or no usable record exists.
"""

import logging
import sys
import time
from pathlib import Path

from ._cache import CacheStore
from ._errors import CdoIoError, CompileError
from ._hasher import hash_file
from ._target import SourceTarget
from ._tools import Compiler
from ._type_check import typecheck_methods


@typecheck_methods
class BuildResult:
    """Outcome of BuildOrchestrator.ensure_built."""

    def __init__(self, artifact: Path, compiled: bool, fingerprint: int):
        self.artifact = artifact
        self.compiled = compiled
        self.fingerprint = fingerprint

    def __repr__(self):
        return f"BuildResult({str(self.artifact)!r}, compiled={self.compiled})"


@typecheck_methods
class BuildOrchestrator:
    """Compiles a source target when, and only when, its content changed."""

    def __init__(self, cache: CacheStore, compiler: Compiler, logger: logging.Logger):
        self.cache = cache
        self.compiler = compiler
        self.logger = logger

    def is_up_to_date(self, target: SourceTarget, fingerprint: int) -> bool:
        """True if the last successful build of target was from content with this fingerprint."""
        stored = self.cache.read_fingerprint(target)
        return stored is not None and stored == fingerprint

    def ensure_built(self, target: SourceTarget) -> BuildResult:
        """Make sure the artifact for target reflects its current content.
        The artifact itself is not checked for existence.
        Raises:  CdoIoError if target is missing or unreadable or the cache is not writable
                 CompileError if the compiler reports failure (the record is left untouched)"""
        if not target.exists():
            raise CdoIoError(f"Source file not found: {target}", target.path)

        start_time = time.perf_counter()
        fingerprint = hash_file(target.path)
        artifact = self.cache.artifact_path(target)

        if self.is_up_to_date(target, fingerprint):
            self.logger.info(f"CACHE HIT - file: {target}, fingerprint: {fingerprint}, "
                             f"Time: {time.perf_counter()-start_time:.3f} seconds")
            return BuildResult(artifact, False, fingerprint)

        self.cache.ensure_dir()
        result = self.compiler(target.path, artifact)

        print(result.stdout, end='')
        print(result.stderr, end='', file=sys.stderr)

        if not result.succeeded:
            self.logger.error(f"COMPILE FAILED - file: {target}, returncode: {result.returncode}")
            raise CompileError(target.path, result.returncode)

        self.cache.write_fingerprint(target, fingerprint)
        self.logger.info(f"CACHE MISS - file: {target}, fingerprint: {fingerprint}, "
                         f"Time: {time.perf_counter()-start_time:.3f} seconds, artifact: {artifact}")
        print(f"Compiled {target} successfully.")
        return BuildResult(artifact, True, fingerprint)
