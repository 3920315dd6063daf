"""
Command-line entry point for cdo.

Usage:
    cdo                       # build if changed, then run the C++ file with main() in this directory
    cdo build                 # only build
    cdo run src/hello.cpp     # build and run a specific file
    cdo clean                 # delete the .cdo cache directory
"""

import argparse
from typing import List, Optional

from ._context import DEFAULT_COMMAND, InvocationContext
from ._logger import CdoLogger
from ._router import CommandRouter


VERSION = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdo",
        description="Build and run a single-file C++ program, recompiling only when it changed.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("command", nargs="?", default=DEFAULT_COMMAND, metavar="COMMAND",
                        help="help, build, run or clean (default: run)")
    parser.add_argument("path", nargs="?", metavar="SOURCE_FILE",
                        help="C++ source file (default: the file with main() in the current directory)")
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = build_parser().parse_args(args)

    context = InvocationContext.from_process(parsed.command, parsed.path)
    logger = CdoLogger(context.data_dir)
    try:
        return CommandRouter(context, logger).dispatch()
    finally:
        logger.close()
