"""cdo - incremental build and run for single-file C++ programs

cdo compiles a C++ source file only when its content changed since the last
successful build, keeping the executable and a fingerprint of the source in a
.cdo directory next to it.

Example usage:
    from pathlib import Path
    from cdo import CommandRouter, InvocationContext, CdoLogger

    context = InvocationContext("build", "hello.cpp", Path.cwd(), Path.home() / ".config" / "cdo")
    exit_code = CommandRouter(context, CdoLogger(context.data_dir)).dispatch()
"""

from ._builder import BuildOrchestrator, BuildResult
from ._cache import CacheStore
from ._context import InvocationContext
from ._errors import CdoError, CdoIoError, CompileError
from ._locator import SourceLocator
from ._logger import CdoLogger
from ._router import CommandRouter
from ._target import SourceTarget

__all__ = [
    'BuildOrchestrator', 'BuildResult', 'CacheStore', 'CdoError', 'CdoIoError', 'CdoLogger',
    'CommandRouter', 'CompileError', 'InvocationContext', 'SourceLocator', 'SourceTarget',
]
