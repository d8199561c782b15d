"""
Tests for the CLI entry point.

Verifies that:
1.  A missing path argument prints usage to stderr and exits non-zero
    without touching the handler.
2.  Stdout carries exactly one status line naming the file, however long
    the name is.
3.  Read failures exit with 1 and are reported on stderr.
4.  `--dry-run`, `--verbose` and `--config` are honoured, and no config file
    is read unless `--config` names one.
"""

from unittest.mock import patch

import pytest

from motion_stripper.cli.__main__ import main


@patch("motion_stripper.cli.handlers.handle_strip")
def test_missing_path_is_usage_error(mock_handle, capsys):
  """
  Scenario: User runs `motion-stripper` with no arguments.
  Expectation: argparse exits with status 2, usage on stderr, no I/O.
  """
  with pytest.raises(SystemExit) as excinfo:
    main([])

  assert excinfo.value.code != 0
  mock_handle.assert_not_called()

  captured = capsys.readouterr()
  assert "usage" in captured.err.lower()
  assert captured.out == ""


@patch("motion_stripper.cli.handlers.handle_strip", return_value=0)
def test_path_forwarded_to_handler(mock_handle, tmp_path):
  target = tmp_path / "A.tsx"
  assert main([str(target)]) == 0

  mock_handle.assert_called_once_with(target, None, None)


@patch("motion_stripper.cli.handlers.handle_strip", return_value=0)
def test_config_path_forwarded_to_handler(mock_handle, tmp_path):
  target = tmp_path / "A.tsx"
  config_file = tmp_path / "pyproject.toml"
  assert main([str(target), "--config", str(config_file)]) == 0

  mock_handle.assert_called_once_with(target, None, config_file)


def test_changed_file_reported(component_file, modal_expected, capsys):
  assert main([str(component_file)]) == 0

  captured = capsys.readouterr()
  assert captured.out == "✅ Modal.tsx - framer-motion removed\n"
  assert captured.err == ""
  assert component_file.read_text() == modal_expected


def test_long_file_name_stays_on_one_line(tmp_path, capsys):
  name = "Very" + "LongComponentName" * 6 + ".tsx"
  path = tmp_path / name
  path.write_text("<motion.div />\n")

  assert main([str(path)]) == 0

  captured = capsys.readouterr()
  assert captured.out == f"✅ {name} - framer-motion removed\n"


def test_clean_file_reported(tmp_path, capsys):
  path = tmp_path / "Plain.jsx"
  path.write_text("<div>plain</div>\n")

  assert main([str(path)]) == 0

  captured = capsys.readouterr()
  assert captured.out == "⏭️  Plain.jsx - no changes needed\n"
  assert path.read_text() == "<div>plain</div>\n"


def test_missing_file_exits_one(tmp_path, capsys):
  assert main([str(tmp_path / "Ghost.tsx")]) == 1

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Cannot read" in captured.err


def test_dry_run_flag(component_file, modal_source, capsys):
  assert main([str(component_file), "--dry-run"]) == 0

  captured = capsys.readouterr()
  assert captured.out == "ℹ️  Modal.tsx - framer-motion would be removed (dry run)\n"
  assert component_file.read_text() == modal_source


def test_verbose_lists_passes(component_file, capsys):
  assert main([str(component_file), "--verbose"]) == 0

  captured = capsys.readouterr()
  assert captured.out == "✅ Modal.tsx - framer-motion removed\n"
  assert "passes applied: imports, presence, tags, props" in captured.err


def test_config_file_settings_applied(tmp_path):
  config_file = tmp_path / "pyproject.toml"
  config_file.write_text('[tool.motion_stripper]\nextra_tags = ["table"]\nextra_props = ["layoutScroll"]\n')
  src = tmp_path / "src"
  src.mkdir()
  path = src / "Grid.tsx"
  path.write_text("<motion.table layoutScroll={true}>x</motion.table>\n")

  assert main([str(path), "--config", str(config_file)]) == 0
  assert path.read_text() == "<table>x</table>\n"


def test_config_file_dry_run(tmp_path):
  config_file = tmp_path / "pyproject.toml"
  config_file.write_text("[tool.motion_stripper]\ndry_run = true\n")
  path = tmp_path / "Box.tsx"
  path.write_text("<motion.div />\n")

  assert main([str(path), "--config", str(config_file)]) == 0
  assert path.read_text() == "<motion.div />\n"


def test_neighbouring_pyproject_ignored_without_flag(tmp_path, capsys):
  (tmp_path / "pyproject.toml").write_text("[tool.motion_stripper\nbroken = ")
  path = tmp_path / "A.tsx"
  path.write_text("<motion.div />\n")

  assert main([str(path)]) == 0

  captured = capsys.readouterr()
  assert captured.out == "✅ A.tsx - framer-motion removed\n"
  assert captured.err == ""
  assert path.read_text() == "<div />\n"


def test_malformed_config_file_exits_one(tmp_path, capsys):
  config_file = tmp_path / "pyproject.toml"
  config_file.write_text("[tool.motion_stripper\nbroken = ")
  path = tmp_path / "A.tsx"
  path.write_text("<motion.div />\n")

  assert main([str(path), "--config", str(config_file)]) == 1

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Cannot read config" in captured.err
  assert path.read_text() == "<motion.div />\n"


def test_invalid_configuration_exits_one(tmp_path, capsys):
  config_file = tmp_path / "pyproject.toml"
  config_file.write_text('[tool.motion_stripper]\nextra_tags = ["not a tag"]\n')
  path = tmp_path / "Box.tsx"
  path.write_text("<motion.div />\n")

  assert main([str(path), "--config", str(config_file)]) == 1

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Invalid configuration" in captured.err
  assert path.read_text() == "<motion.div />\n"


def test_version_flag(capsys):
  with pytest.raises(SystemExit) as excinfo:
    main(["--version"])

  assert excinfo.value.code == 0
  assert "motion-stripper" in capsys.readouterr().out
