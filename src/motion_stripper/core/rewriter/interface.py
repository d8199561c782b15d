"""
Interface definition for Rewrite Passes.

This module defines the abstract base class that all transformation passes
must implement to be compatible with the ``RewritePipeline``.
"""

from abc import ABC, abstractmethod

from motion_stripper.config import RuntimeConfig


class RewritePass(ABC):
  """
  Abstract contract for a transformation pass in the rewriting pipeline.

  A pass is a pure text-to-text function: it must not keep state between
  calls and must not touch the file system.
  """

  #: Short identifier used in logs and `StripResult.passes_applied`.
  name: str = "pass"

  @abstractmethod
  def transform(self, code: str, config: RuntimeConfig) -> str:
    """
    Executes the transformation logic on the given text.

    Args:
        code: The input source text.
        config: The runtime configuration (names to match).

    Returns:
        The transformed source text.
    """
    pass
