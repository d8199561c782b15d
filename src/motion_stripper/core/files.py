"""
File-level read / transform / write cycle.

One call touches exactly one path: a single full read and, only when the text
actually changed (and dry-run is off), a single full overwrite. The original
file is never modified before the rewrite has completed in memory.
"""

import logging
from pathlib import Path
from typing import Optional

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.engine import StripEngine
from motion_stripper.core.errors import FileAccessError
from motion_stripper.core.result import FileReport

logger = logging.getLogger(__name__)

__all__ = ["FileAccessError", "read_source", "strip_file", "write_source"]


def read_source(path: Path) -> str:
  """
  Reads a whole file using the platform default encoding.

  Line endings are kept as-is (``newline=""``) so CRLF files round-trip.

  Args:
      path: File to read.

  Returns:
      The file contents.

  Raises:
      FileAccessError: If the file cannot be opened or decoded.
  """
  try:
    with open(path, "rt", newline="") as f:
      return f.read()
  except (OSError, UnicodeDecodeError) as e:
    raise FileAccessError(f"Cannot read {path}: {e}") from e


def write_source(path: Path, code: str) -> None:
  """
  Replaces the whole file with ``code``.

  Args:
      path: File to overwrite.
      code: New contents.

  Raises:
      FileAccessError: If the file cannot be written or encoded.
  """
  try:
    with open(path, "wt", newline="") as f:
      f.write(code)
  except (OSError, UnicodeEncodeError) as e:
    raise FileAccessError(f"Cannot write {path}: {e}") from e


def strip_file(path: Path, config: Optional[RuntimeConfig] = None, engine: Optional[StripEngine] = None) -> FileReport:
  """
  Strips animation constructs from one file in place.

  Args:
      path: The file to rewrite.
      config: Runtime settings (ignored if ``engine`` is given).
      engine: Pre-built engine to reuse.

  Returns:
      FileReport: Whether the text changed and whether the file was written.

  Raises:
      FileAccessError: On read or write failure.
  """
  path = Path(path)
  engine = engine or StripEngine(config)

  code = read_source(path)
  result = engine.run(code)

  written = False
  if result.changed and not engine.config.dry_run:
    write_source(path, result.code)
    written = True
  elif result.changed:
    logger.debug(f"Dry run: not writing {path}")

  return FileReport(path=path, changed=result.changed, written=written, passes_applied=result.passes_applied)
