"""
Orchestration Engine for Text Rewrites.

This module provides the `StripEngine`, the primary driver of the rewrite.
It feeds one source text through the fixed pass sequence:

1.  **Import removal**: drop ``import { ... } from 'framer-motion';``.
2.  **Presence wrappers**: unwrap ``<AnimatePresence>`` and its alias.
3.  **Alias declaration**: drop ``const AnimatePresenceWithChildren = ...;``.
4.  **Tags**: ``<motion.div>`` becomes ``<div>``.
5.  **Props**: animation-only attributes are deleted.
6.  **Blank lines**: runs of 3+ line breaks are folded to one blank line.

Every pass is a pure string function that only ever shortens the text. One
pass can expose a match for an earlier one (an import list emptied of a prop,
a value freed of a nested prop), so the sequence is repeated until the text
settles. Running the engine over its own output therefore changes nothing.
"""

import logging
from typing import List, Optional

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.result import StripResult
from motion_stripper.core.rewriter import RewritePass, RewritePipeline, default_passes

logger = logging.getLogger(__name__)


class StripEngine:
  """
  Runs the rewrite pipeline over source text.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, passes: Optional[List[RewritePass]] = None) -> None:
    """
    Initializes the Engine.

    Args:
        config: Runtime settings. Defaults to built-in names.
        passes: Override of the pass sequence. Defaults to `default_passes()`.
    """
    self.config = config or RuntimeConfig()
    self.pipeline = RewritePipeline(passes if passes is not None else default_passes())

  def run(self, code: str) -> StripResult:
    """
    Rewrites one source text.

    Args:
        code: Full file contents.

    Returns:
        StripResult: The rewritten text and change information.
    """
    current = code
    applied: List[str] = []

    while True:
      result = self.pipeline.run(current, self.config)
      applied.extend(name for name in result.passes_applied if name not in applied)
      # Stop once a round is a no-op, or if a custom pass stops shrinking the text.
      if not result.changed or len(result.code) >= len(current):
        current = result.code
        break
      logger.debug(f"Rewrite round changed the text, repeating ({len(result.code)} chars)")
      current = result.code

    return StripResult(code=current, changed=current != code, passes_applied=applied)
