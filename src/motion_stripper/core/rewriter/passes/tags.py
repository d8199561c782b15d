"""
Tag Rewrite Pass.

Turns animated elements back into plain ones::

    <motion.div className="x">   ->   <div className="x">
    <motion.img src="a.png" />   ->   <img src="a.png" />
    </motion.div>                ->   </div>

Only the tag head is touched, so any number of attributes may follow it.
Names not in the configured tag list are left alone.
"""

import re
from typing import Tuple

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.rewriter.interface import RewritePass


def tag_patterns(namespace: str, tag: str) -> Tuple["re.Pattern[str]", "re.Pattern[str]"]:
  """
  Builds the opening and closing patterns for ``<namespace.tag>``.

  The opening pattern captures the delimiter after the name (whitespace, ``>``
  or ``/>``) so it can be put back unchanged.

  Args:
      namespace: JSX namespace (e.g. 'motion').
      tag: Element name (e.g. 'div').

  Returns:
      (opening_pattern, closing_pattern)
  """
  qualified = re.escape(namespace) + r"\." + re.escape(tag)
  opening = re.compile(r"<" + qualified + r"(\s|>|/>)")
  closing = re.compile(r"</" + qualified + r">")
  return opening, closing


class TagRewritePass(RewritePass):
  """
  Rewrites ``<motion.TAG>`` / ``</motion.TAG>`` to ``<TAG>`` / ``</TAG>``.
  """

  name = "tags"

  def transform(self, code: str, config: RuntimeConfig) -> str:
    for tag in config.tags:
      opening, closing = tag_patterns(config.namespace, tag)
      code = opening.sub(lambda m, t=tag: f"<{t}{m.group(1)}", code)
      code = closing.sub(f"</{tag}>", code)
    return code
