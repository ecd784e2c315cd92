# tempscope/cli.py
"""
Run a command inside a scoped temp directory (or file).

    tempscope [--file] [--prefix P] [--log-level L] -- COMMAND [ARGS...]

The path is exported to the child as TEMPSCOPE_PATH and removed once the
command exits. Exit status is the command's own; 1 if the temp resource
could not be created, 127 if the command was not found.
"""
from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from typing import List, Sequence

from tempscope import config as cfg
from tempscope.scoped import ScopedDirectory, ScopedFile
from tempscope.util.logging_setup import init_logging

log = logging.getLogger("tempscope.cli")

PATH_ENV_VAR = "TEMPSCOPE_PATH"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tempscope",
        description="Run a command with a temporary directory or file that is removed afterwards",
    )
    parser.add_argument("--file", action="store_true", help="Create an empty file instead of a directory")
    parser.add_argument("--prefix", default=None, help="Name prefix (default: TEMPSCOPE_DEFAULT_PREFIX or 'tmp')")
    parser.add_argument("--log-level", default=None, help="debug|info|warning|error|critical")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run, after '--'")
    return parser


def _strip_separator(command: List[str]) -> List[str]:
    return command[1:] if command and command[0] == "--" else command


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    command = _strip_separator(list(args.command))
    if not command:
        parser.error("a command to run is required")

    init_logging(args.log_level or cfg.settings.log_level)

    scoped_cls = ScopedFile if args.file else ScopedDirectory
    with scoped_cls(args.prefix) as scoped:
        if not scoped.good:
            log.error("Could not create a temporary %s", "file" if args.file else "directory")
            return 1

        log.info("Created %s", scoped.path)
        env = dict(os.environ)
        env[PATH_ENV_VAR] = str(scoped.path)
        try:
            proc = subprocess.run(command, env=env)
        except FileNotFoundError:
            log.error("Command not found: %s", command[0])
            return 127
        except KeyboardInterrupt:
            return 130
        return proc.returncode


if __name__ == "__main__":
    sys.exit(main())
