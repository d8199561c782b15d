"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so log capture in one test does not leak into the next.
- Shared component source samples.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'motion_stripper' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from motion_stripper.utils.console import reset_console  # noqa: E402

MODAL_SOURCE = """import React from 'react';
import { motion, AnimatePresence } from 'framer-motion';

export default function Modal({ open, onClose }) {
  return (
    <AnimatePresence>
      {open && (
        <motion.div
          initial={{ opacity: 0, scale: 0.95, y: 20 }}
          animate={{ opacity: 1, scale: 1, y: 0 }}
          exit={{ opacity: 0 }}
          transition={{ duration: 0.2, ease: [0.4, 0, 0.2, 1] }}
          onClick={onClose}
          className="modal"
        >
          <motion.h2 whileHover={{ scale: 1.05 }}>Title</motion.h2>
        </motion.div>
      )}
    </AnimatePresence>
  );
}
"""

MODAL_EXPECTED = """import React from 'react';

export default function Modal({ open, onClose }) {
  return (
      {open && (
        <div
          onClick={onClose}
          className="modal"
        >
          <h2>Title</h2>
        </div>
      )}
  );
}
"""


@pytest.fixture(autouse=True)
def isolate_console(monkeypatch):
  """
  Resets the console proxy (stdout status, stderr logs, INFO level) around every test.

  Colour forcing from the environment is cleared so captured output is plain text.
  """
  monkeypatch.delenv("FORCE_COLOR", raising=False)
  reset_console()
  yield
  reset_console()


@pytest.fixture
def modal_source() -> str:
  """A small component using every construct the rewriter knows."""
  return MODAL_SOURCE


@pytest.fixture
def modal_expected() -> str:
  """The expected rewrite of `modal_source`."""
  return MODAL_EXPECTED


@pytest.fixture
def component_file(tmp_path, modal_source) -> Path:
  """
  Writes `modal_source` to a file inside its own directory.

  The directory is nested so a test can drop a pyproject.toml next to it.
  """
  src_dir = tmp_path / "src"
  src_dir.mkdir()
  path = src_dir / "Modal.tsx"
  path.write_text(modal_source)
  return path
