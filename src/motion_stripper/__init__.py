"""
motion-stripper Package.

A deterministic source rewriter that removes `framer-motion` from JSX/TSX
component files: the library import, ``<AnimatePresence>`` wrappers,
``<motion.*>`` tags and animation-only props. Everything else is left
byte-for-byte intact.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import motion_stripper as ms
    code = '<motion.div className="x" animate={{ opacity: 1 }}>hi</motion.div>'
    print(ms.strip(code))
    # <div className="x">hi</div>

In-place File Rewrite
^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from pathlib import Path
    from motion_stripper import RuntimeConfig, strip_file

    report = strip_file(Path("src/components/Hero.tsx"), RuntimeConfig(extra_props=["layoutScroll"]))
    print(report.changed, report.written)
"""

from typing import Any

from motion_stripper.config import RuntimeConfig
from motion_stripper.core.engine import StripEngine
from motion_stripper.core.files import FileAccessError, strip_file
from motion_stripper.core.result import FileReport, StripResult

__version__ = "0.1.0"


def strip(code: str, **settings: Any) -> str:
  """
  Removes animation constructs from a string of component source.

  This is a convenience wrapper around `StripEngine`. For files, use
  `strip_file` or the ``motion-stripper`` command.

  Args:
      code (str): The source text.
      **settings: `RuntimeConfig` fields (e.g. ``extra_tags=["table"]``).

  Returns:
      str: The rewritten text (identical to ``code`` if nothing matched).
  """
  engine = StripEngine(RuntimeConfig(**settings))
  return engine.run(code).code


__all__ = [
  "FileAccessError",
  "FileReport",
  "RuntimeConfig",
  "StripEngine",
  "StripResult",
  "strip",
  "strip_file",
  "__version__",
]
