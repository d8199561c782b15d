"""
Rewriter Package.

Text-level rewrite machinery:
- ``interface``: the ``RewritePass`` contract.
- ``pipeline``: ordered execution of passes.
- ``passes/*``: the concrete passes (imports, presence wrappers, tags, props, blank lines).
"""

from motion_stripper.core.rewriter.interface import RewritePass
from motion_stripper.core.rewriter.pipeline import RewritePipeline
from motion_stripper.core.rewriter.passes import (
  AliasDeclarationPass,
  BlankLinePass,
  ImportRemovalPass,
  PresenceWrapperPass,
  PropStripPass,
  TagRewritePass,
)


def default_passes():
  """
  Returns the standard pass sequence. Order matters: tags are renamed before
  props are stripped, and blank lines are collapsed last.
  """
  return [
    ImportRemovalPass(),
    PresenceWrapperPass(),
    AliasDeclarationPass(),
    TagRewritePass(),
    PropStripPass(),
    BlankLinePass(),
  ]


__all__ = [
  "RewritePass",
  "RewritePipeline",
  "default_passes",
]
