"""
Presence Wrapper Passes.

``<AnimatePresence>`` (and the ``AnimatePresenceWithChildren`` alias some
components declare to satisfy the type checker) only orchestrate exit
animations. Two passes deal with them:

1.  ``PresenceWrapperPass`` drops the opening and closing wrapper tags but keeps
    the children. Each removed tag, together with the indentation and line
    breaks before it, becomes a single line break so neighbouring lines are
    never glued together.
2.  ``AliasDeclarationPass`` drops the
    ``const AnimatePresenceWithChildren = AnimatePresence as ...;`` line.
"""

import re
from typing import List

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.rewriter.interface import RewritePass

# An attribute list may contain arrow functions; their '=>' must not end the tag.
_ATTRS = r"(?:=>|[^>])*"


def _line_break_for(match: "re.Match[str]") -> str:
  """Keeps CRLF files CRLF."""
  return "\r\n" if "\r\n" in match.group(0) else "\n"


def presence_patterns(config: RuntimeConfig) -> List["re.Pattern[str]"]:
  """
  Builds opening/closing tag patterns for the wrapper and its alias.

  The name must end where the tag name ends, so ``<AnimatePresenceProps`` (a
  type argument) is not mistaken for the wrapper.

  Args:
      config: Supplies the component and alias names.

  Returns:
      List of compiled patterns, alias last.
  """
  patterns = []
  for component in (config.presence_component, config.presence_alias):
    name = re.escape(component)
    patterns.append(re.compile(r"\s*<" + name + r"(?![\w.$])" + _ATTRS + r">\r?\n?"))
    patterns.append(re.compile(r"\s*</" + name + r"\s*>\r?\n?"))
  return patterns


def alias_declaration_pattern(config: RuntimeConfig) -> "re.Pattern[str]":
  """
  Builds the regex for ``const <alias> = <component> as <Type>;``.

  Args:
      config: Supplies the component and alias names.

  Returns:
      Compiled pattern including the trailing line terminator.
  """
  return re.compile(
    r"const\s+"
    + re.escape(config.presence_alias)
    + r"\s*=\s*"
    + re.escape(config.presence_component)
    + r"\s+as[^;]+;[ \t]*\r?\n?"
  )


class PresenceWrapperPass(RewritePass):
  """
  Unwraps ``<AnimatePresence>`` blocks, keeping their children.
  """

  name = "presence"

  def transform(self, code: str, config: RuntimeConfig) -> str:
    for pattern in presence_patterns(config):
      code = pattern.sub(_line_break_for, code)
    return code


class AliasDeclarationPass(RewritePass):
  """
  Removes the local type-cast alias of the presence wrapper.
  """

  name = "alias"

  def transform(self, code: str, config: RuntimeConfig) -> str:
    return alias_declaration_pattern(config).sub("", code)
