"""
Animation Prop Stripping Pass.

Deletes animation-only attributes from every tag, whatever the tag is. A prop
is recognised only when its name is in the configured list, it is preceded by
whitespace and immediately followed by ``=``. That keeps ``data-animate`` or
``layoutIdx`` intact.

Accepted value shapes:

*   ``prop={expr}``: a single-brace expression with no braces inside.
*   ``prop={{ ... }}``: an object literal; braces may nest up to three levels
    (``{{ a: { b: { c: 1 } } }}``), sibling objects allowed at each level.
*   ``prop="..."``: a double-quoted string.

Anything else (ternaries returning objects, deeper nesting, template literals)
is left as is. The whitespace run before the prop is removed with it.

Removing an inner prop can turn its enclosing value into a recognised shape
(``initial={ animate={1}x}``), so the sweep repeats until nothing changes.
"""

import re
from typing import List

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.rewriter.interface import RewritePass

_BARE_EXPR = r"\{[^{}]+\}"

# Innermost first: {..}, then objects containing those, then the outer {{..}} pair.
_LEVEL_3 = r"\{[^{}]*\}"
_LEVEL_2 = r"\{(?:[^{}]|" + _LEVEL_3 + r")*\}"
_OBJECT_LITERAL = r"\{\{(?:[^{}]|" + _LEVEL_2 + r")*\}\}"

_STRING = r'"[^"]*"'

VALUE_FORMS = (_BARE_EXPR, _OBJECT_LITERAL, _STRING)


def prop_patterns(prop: str) -> List["re.Pattern[str]"]:
  """
  Builds one pattern per accepted value shape for ``prop``.

  Args:
      prop: Attribute name (e.g. 'whileHover').

  Returns:
      Patterns in application order.
  """
  head = r"\s+" + re.escape(prop) + r"="
  return [re.compile(head + form) for form in VALUE_FORMS]


def strip_prop(code: str, prop: str) -> str:
  """
  Removes every occurrence of ``prop`` with a recognised value.

  Args:
      code: Source text.
      prop: Attribute name.

  Returns:
      The text without the attribute.
  """
  for pattern in prop_patterns(prop):
    code = pattern.sub("", code)
  return code


class PropStripPass(RewritePass):
  """
  Removes every configured animation prop from the text.
  """

  name = "props"

  def transform(self, code: str, config: RuntimeConfig) -> str:
    while True:
      swept = code
      for prop in config.props:
        swept = strip_prop(swept, prop)
      if swept == code:
        return code
      code = swept
