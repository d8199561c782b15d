"""
Recognised Animation Vocabulary.

This module holds the closed, ordered name lists the rewriter matches against.
Matching is literal: a tag or prop that is not listed here (or added through
``RuntimeConfig.extra_tags`` / ``extra_props``) is never touched.

The lists are plain tuples so they stay easy to audit and diff.
"""

from typing import Iterable, Tuple

# Module specifier whose named import is deleted.
DEFAULT_LIBRARY = "framer-motion"

# JSX namespace of animated elements (``<motion.div>``).
DEFAULT_NAMESPACE = "motion"

# Presence wrapper component and its type-cast alias.
DEFAULT_PRESENCE_COMPONENT = "AnimatePresence"
DEFAULT_PRESENCE_ALIAS = "AnimatePresenceWithChildren"

# Elements that may appear as ``<motion.TAG>``.
MOTION_TAGS: Tuple[str, ...] = (
  "div",
  "h1",
  "h2",
  "h3",
  "h4",
  "h5",
  "h6",
  "p",
  "span",
  "button",
  "form",
  "nav",
  "path",
  "a",
  "img",
  "section",
  "li",
  "ul",
  "ol",
  "header",
  "footer",
  "main",
  "article",
  "aside",
  "input",
  "label",
  "svg",
  "circle",
  "rect",
  "g",
)

# Attributes only the animation library understands.
MOTION_PROPS: Tuple[str, ...] = (
  "initial",
  "animate",
  "transition",
  "whileHover",
  "whileTap",
  "whileInView",
  "viewport",
  "exit",
  "variants",
  "layout",
  "layoutId",
  "onAnimationComplete",
  "custom",
  "drag",
  "dragConstraints",
  "dragElastic",
  "onDragEnd",
  "whileDrag",
  "whileFocus",
)


def merge_names(base: Iterable[str], extra: Iterable[str]) -> Tuple[str, ...]:
  """
  Appends ``extra`` names after ``base``, keeping first-seen order.

  Args:
      base: The built-in list.
      extra: User supplied additions.

  Returns:
      Tuple[str, ...]: Combined list without duplicates.
  """
  return tuple(dict.fromkeys([*base, *extra]))
