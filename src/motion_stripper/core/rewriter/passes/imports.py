"""
Import Removal Pass.

Deletes the named-import declaration of the animation library, e.g.::

    import { motion, AnimatePresence } from 'framer-motion';

The identifier list between the braces is not inspected, and the
``import type { ... }`` form is matched too. The declaration's
trailing line terminator goes with it.
"""

import re

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.rewriter.interface import RewritePass


def import_pattern(library: str) -> "re.Pattern[str]":
  """
  Builds the regex matching ``import { ... } from '<library>';``.

  Args:
      library: The module specifier (e.g. 'framer-motion').

  Returns:
      Compiled pattern. Either quote style is accepted; the closing quote must
      match the opening one.
  """
  return re.compile(r"import\s*(?:type\s+)?\{[^}]*\}\s*from\s*(['\"])" + re.escape(library) + r"\1[ \t]*;?[ \t]*\r?\n?")


class ImportRemovalPass(RewritePass):
  """
  Removes the animation library import line.
  """

  name = "imports"

  def transform(self, code: str, config: RuntimeConfig) -> str:
    return import_pattern(config.library).sub("", code)
