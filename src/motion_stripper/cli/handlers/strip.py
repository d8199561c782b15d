"""
Strip Command Handler.

This module implements the single user-facing action: strip animation
constructs from one file. It orchestrates:
1. Configuration loading (an optional TOML file + CLI overrides).
2. The read / rewrite / write cycle.
3. The one-line status report on stdout (errors go to stderr).
"""

import logging
from pathlib import Path
from typing import Optional

from rich.markup import escape

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.files import FileAccessError, strip_file
from motion_stripper.core.result import FileReport
from motion_stripper.utils.console import log_error, print_info, print_skip, print_success

logger = logging.getLogger(__name__)


def handle_strip(input_path: Path, dry_run: Optional[bool] = None, config_path: Optional[Path] = None) -> int:
  """
  Handles the strip command execution.

  Args:
      input_path: The file to rewrite in place.
      dry_run: If True, report what would change without writing. None defers to config.
      config_path: TOML file with a ``[tool.motion_stripper]`` table. None reads nothing.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  try:
    config = RuntimeConfig.load(dry_run=dry_run, config_path=config_path)
    report = strip_file(input_path, config)
  except FileAccessError as e:
    log_error(escape(str(e)))
    return 1

  _print_report(report, config)
  return 0


def _print_report(report: FileReport, config: RuntimeConfig) -> None:
  """
  Emits the status line for one file.

  Args:
      report: Outcome of the rewrite.
      config: Used for the library name in the message.
  """
  name = escape(report.name)
  library = escape(config.library)

  if report.written:
    print_success(f"{name} - {library} removed")
  elif report.changed:
    print_info(f"{name} - {library} would be removed (dry run)")
  else:
    print_skip(f"{name} - no changes needed")

  if report.passes_applied:
    logger.debug(f"{name}: passes applied: {', '.join(report.passes_applied)}")
