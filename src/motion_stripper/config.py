"""
Runtime Configuration Store.

Settings are resolved from three layers, lowest priority first:
built-in defaults, the ``[tool.motion_stripper]`` table of a TOML file the
user names explicitly, and explicit arguments (usually from the CLI).
"""

import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from motion_stripper.core.errors import FileAccessError
from motion_stripper.vocabulary import (
  DEFAULT_LIBRARY,
  DEFAULT_NAMESPACE,
  DEFAULT_PRESENCE_ALIAS,
  DEFAULT_PRESENCE_COMPONENT,
  MOTION_PROPS,
  MOTION_TAGS,
  merge_names,
)

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

logger = logging.getLogger(__name__)

TOOL_SECTION = "motion_stripper"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_MODULE_SPECIFIER = re.compile(r"^[@A-Za-z0-9_./-]+$")


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the rewrite engine.
  """

  library: str = Field(DEFAULT_LIBRARY, description="Module whose named import is removed.")
  namespace: str = Field(DEFAULT_NAMESPACE, description="JSX namespace of animated tags (e.g. 'motion').")
  presence_component: str = Field(DEFAULT_PRESENCE_COMPONENT, description="Presence wrapper component name.")
  presence_alias: str = Field(DEFAULT_PRESENCE_ALIAS, description="Type-cast alias of the presence wrapper.")
  extra_tags: List[str] = Field(default_factory=list, description="Tag names appended to the built-in list.")
  extra_props: List[str] = Field(default_factory=list, description="Prop names appended to the built-in list.")
  dry_run: bool = Field(False, description="If True, report changes without writing files.")

  @field_validator("namespace", "presence_component", "presence_alias")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    """
    Ensures a JSX name is a plain identifier.

    Args:
        v (str): The candidate name.

    Returns:
        str: The stripped name.

    Raises:
        ValueError: If the name is empty or contains non-identifier characters.
    """
    v_clean = v.strip()
    if not _IDENTIFIER.match(v_clean):
      raise ValueError(f"Invalid identifier: '{v}'")
    return v_clean

  @field_validator("library")
  @classmethod
  def validate_library(cls, v: str) -> str:
    """
    Ensures the module specifier looks like an npm package path.

    Args:
        v (str): The module specifier.

    Returns:
        str: The stripped specifier.

    Raises:
        ValueError: If the specifier is empty or malformed.
    """
    v_clean = v.strip()
    if not _MODULE_SPECIFIER.match(v_clean):
      raise ValueError(f"Invalid module specifier: '{v}'")
    return v_clean

  @field_validator("extra_tags", "extra_props")
  @classmethod
  def validate_names(cls, v: List[str]) -> List[str]:
    """
    Rejects names that are not plain identifiers.

    Names end up inside regular expressions, so anything beyond identifier
    characters is refused rather than escaped.

    Args:
        v (List[str]): Names to check.

    Returns:
        List[str]: The stripped names.

    Raises:
        ValueError: On the first invalid name.
    """
    cleaned = []
    for name in v:
      name_clean = name.strip()
      if not _IDENTIFIER.match(name_clean):
        raise ValueError(f"Invalid tag or prop name: '{name}'")
      cleaned.append(name_clean)
    return cleaned

  @property
  def tags(self) -> Tuple[str, ...]:
    """
    Effective, ordered tag list (built-in names first).

    Returns:
        Tuple[str, ...]: Tag names.
    """
    return merge_names(MOTION_TAGS, self.extra_tags)

  @property
  def props(self) -> Tuple[str, ...]:
    """
    Effective, ordered prop list (built-in names first).

    Returns:
        Tuple[str, ...]: Prop names.
    """
    return merge_names(MOTION_PROPS, self.extra_props)

  @classmethod
  def load(
    cls,
    dry_run: Optional[bool] = None,
    extra_tags: Optional[List[str]] = None,
    extra_props: Optional[List[str]] = None,
    config_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from an explicit TOML file and overrides with explicit arguments.

    Nothing is read unless ``config_path`` is given.

    Args:
        dry_run (Optional[bool]): Override for dry-run mode.
        extra_tags (Optional[List[str]]): Tags added on top of the TOML list.
        extra_props (Optional[List[str]]): Props added on top of the TOML list.
        config_path (Optional[Path]): TOML file holding a ``[tool.motion_stripper]`` table.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        FileAccessError: If the config file cannot be read, parsed or validated.
    """
    toml_config: Dict[str, Any] = {}
    if config_path is not None:
      toml_config = _read_toml_settings(config_path)
      logger.debug(f"Using tool.{TOOL_SECTION} settings from {config_path}")

    final_dry_run = dry_run if dry_run is not None else toml_config.get("dry_run", False)

    try:
      return cls(
        library=toml_config.get("library", DEFAULT_LIBRARY),
        namespace=toml_config.get("namespace", DEFAULT_NAMESPACE),
        presence_component=toml_config.get("presence_component", DEFAULT_PRESENCE_COMPONENT),
        presence_alias=toml_config.get("presence_alias", DEFAULT_PRESENCE_ALIAS),
        extra_tags=_extend(toml_config.get("extra_tags", []), extra_tags),
        extra_props=_extend(toml_config.get("extra_props", []), extra_props),
        dry_run=final_dry_run,
      )
    except ValidationError as e:
      if config_path is None:
        raise
      raise FileAccessError(f"Invalid configuration in {config_path}: {e}") from e


def _extend(toml_value: Any, cli_values: Optional[List[str]]) -> Any:
  """
  Appends CLI names to a TOML list.

  A TOML value that is not a list is returned untouched so model validation
  reports it instead of it being split into characters.
  """
  if not isinstance(toml_value, list):
    return toml_value
  return [*toml_value, *(cli_values or [])]


def _read_toml_settings(path: Path) -> Dict[str, Any]:
  """
  Reads the ``[tool.motion_stripper]`` table of one TOML file.

  Args:
      path (Path): The file named by the user (typically a pyproject.toml).

  Returns:
      Dict[str, Any]: The table, or an empty dict if the file has none.

  Raises:
      FileAccessError: If the file cannot be opened or is not valid TOML.
  """
  try:
    with open(path, "rb") as f:
      data = tomllib.load(f)
  except (OSError, tomllib.TOMLDecodeError) as e:
    raise FileAccessError(f"Cannot read config {path}: {e}") from e

  return data.get("tool", {}).get(TOOL_SECTION, {})
