"""
Blank Line Collapse Pass.

Deleting imports, wrappers and props leaves holes behind. Any run of three or
more line terminators is folded into exactly two (a single blank line). The
terminator style of the run (LF or CRLF) is kept.
"""

import re

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.rewriter.interface import RewritePass

BLANK_RUN = re.compile(r"(?:\r?\n){3,}")


def _two_breaks(match: "re.Match[str]") -> str:
  return "\r\n\r\n" if match.group(0).startswith("\r") else "\n\n"


class BlankLinePass(RewritePass):
  """
  Collapses runs of blank lines.
  """

  name = "blank-lines"

  def transform(self, code: str, config: RuntimeConfig) -> str:
    return BLANK_RUN.sub(_two_breaks, code)
