"""
Main Entry Point for motion-stripper CLI.

This module handles argument parsing and dispatches to the handler defined in
`motion_stripper.cli.handlers`. One invocation processes exactly one file;
drive several files from a shell loop.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from motion_stripper.cli import handlers
from motion_stripper.utils.console import set_verbose
from motion_stripper import __version__


def build_parser() -> argparse.ArgumentParser:
  """
  Defines the command line.

  Returns:
      argparse.ArgumentParser: The configured parser.
  """
  parser = argparse.ArgumentParser(
    prog="motion-stripper",
    description="motion-stripper: Remove framer-motion animations from a JSX/TSX component file",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("path", type=Path, help="Component file to rewrite in place")
  parser.add_argument(
    "--dry-run",
    action="store_true",
    default=None,
    help="Report whether the file would change without writing it (Overrides config)",
  )
  parser.add_argument(
    "--config",
    type=Path,
    default=None,
    metavar="TOML",
    help="Read settings from the [tool.motion_stripper] table of this file (e.g. pyproject.toml)",
  )
  parser.add_argument("-v", "--verbose", action="store_true", help="Log which passes changed the file")
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  A missing path makes argparse print the usage to stderr and exit with status 2
  before any file is touched.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = build_parser()
  args = parser.parse_args(argv)

  if args.verbose:
    set_verbose(True)

  return handlers.handle_strip(args.path, args.dry_run, args.config)


if __name__ == "__main__":
  sys.exit(main())
