"""
Orchestration logic for executing sequential rewrite passes.

This module provides the ``RewritePipeline``, which runs a fixed, ordered list
of ``RewritePass`` instances, each one consuming the output of the previous one.
"""

import logging
from typing import List

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.result import StripResult
from motion_stripper.core.rewriter.interface import RewritePass

logger = logging.getLogger(__name__)


class RewritePipeline:
  """
  Manages a sequence of rewrite passes and executes them in order.
  """

  def __init__(self, passes: List[RewritePass]) -> None:
    """
    Initializes the pipeline with a list of passes.

    Args:
        passes: Sequenced list of passes to execute.
    """
    self.passes = passes

  def run(self, code: str, config: RuntimeConfig) -> StripResult:
    """
    Executes all registered passes sequentially on the text.

    Args:
        code: The source text to transform.
        config: The runtime configuration shared by all passes.

    Returns:
        StripResult: The final text plus the names of passes that changed it.
    """
    current = code
    applied: List[str] = []

    for pass_instance in self.passes:
      updated = pass_instance.transform(current, config)
      if updated != current:
        logger.debug(f"Pass '{pass_instance.name}' rewrote {len(current)} -> {len(updated)} chars")
        applied.append(pass_instance.name)
      current = updated

    return StripResult(code=current, changed=current != code, passes_applied=applied)
