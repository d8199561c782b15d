"""
Transformation Passes Package.
"""

from motion_stripper.core.rewriter.passes.imports import ImportRemovalPass
from motion_stripper.core.rewriter.passes.presence import PresenceWrapperPass, AliasDeclarationPass
from motion_stripper.core.rewriter.passes.tags import TagRewritePass
from motion_stripper.core.rewriter.passes.props import PropStripPass
from motion_stripper.core.rewriter.passes.whitespace import BlankLinePass

__all__ = [
  "ImportRemovalPass",
  "PresenceWrapperPass",
  "AliasDeclarationPass",
  "TagRewritePass",
  "PropStripPass",
  "BlankLinePass",
]
