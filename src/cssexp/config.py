"""
Runtime Configuration Store.

Holds the options that shape compilation (selector combinator, emitter
formatting and the opt-in syntax extensions) and resolves them from
``[tool.cssexp]`` in ``pyproject.toml`` plus CLI overrides.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.markup import escape

from cssexp.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the compiler pipeline.
  """

  model_config = ConfigDict(frozen=True)

  combinator: str = Field(" ", description="Separator joining nested selector fragments (descendant by default).")
  indent: str = Field("  ", description="Prefix written before each declaration line.")
  rule_separator: str = Field("\n", description="Text placed between rule blocks (default leaves one blank line).")

  inline_functions: bool = Field(False, description="Keep 'name(...)' groups attached to atoms, e.g. var(--x, red).")
  list_values: bool = Field(False, description="Accept a list of atoms as a space-joined value.")
  selector_lists: bool = Field(False, description="Expand comma-separated selector fragments.")

  source_suffix: str = Field(".cssx", description="File suffix picked up when compiling a directory.")

  @field_validator("combinator")
  @classmethod
  def validate_combinator(cls, v: str) -> str:
    """
    Ensures the combinator is usable as a separator.

    Args:
        v (str): Raw combinator.

    Returns:
        str: The combinator unchanged.

    Raises:
        ValueError: If the combinator is empty.
    """
    if v == "":
      raise ValueError("Combinator must not be empty. Use ' ' for descendant selectors.")
    return v

  @field_validator("indent", mode="before")
  @classmethod
  def validate_indent(cls, v: Any) -> Any:
    """Accepts an integer width as shorthand for that many spaces."""
    if isinstance(v, bool):
      raise ValueError("Indent must be a string or a non-negative integer.")
    if isinstance(v, int):
      if v < 0:
        raise ValueError("Indent width must be non-negative.")
      return " " * v
    return v

  @field_validator("source_suffix")
  @classmethod
  def validate_suffix(cls, v: str) -> str:
    """Requires a leading dot, e.g. '.cssx'."""
    if not v.startswith(".") or len(v) < 2:
      raise ValueError(f"Invalid source suffix: '{v}'. Expected a leading dot, e.g. '.cssx'.")
    return v

  @classmethod
  def load(
    cls,
    combinator: Optional[str] = None,
    indent: Optional[Any] = None,
    inline_functions: Optional[bool] = None,
    list_values: Optional[bool] = None,
    selector_lists: Optional[bool] = None,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Precedence (highest first): explicit keyword arguments, `overrides`
    (from ``--config key=value``), the TOML table, model defaults.

    Args:
        combinator (Optional[str]): Override for the selector combinator.
        indent (Optional[Any]): Override for declaration indentation.
        inline_functions (Optional[bool]): Override for inline function lexing.
        list_values (Optional[bool]): Override for list value support.
        selector_lists (Optional[bool]): Override for selector list expansion.
        overrides (Optional[Dict]): Generic key/value overrides.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    unknown = sorted(k for k in toml_config if k not in cls.model_fields)
    if unknown:
      log_warning(f"Ignoring unknown \\[tool.cssexp] keys: {escape(', '.join(unknown))}")

    overrides = overrides or {}
    merged.update({k: v for k, v in overrides.items() if k in cls.model_fields})
    unknown = sorted(k for k in overrides if k not in cls.model_fields)
    if unknown:
      log_warning(f"Ignoring unknown --config keys: {escape(', '.join(unknown))}")

    explicit = {
      "combinator": combinator,
      "indent": indent,
      "inline_functions": inline_functions,
      "list_values": list_values,
      "selector_lists": selector_lists,
    }
    merged.update({k: v for k, v in explicit.items() if v is not None})

    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(f"Could not read {escape(str(toml_path))}: {escape(str(e))}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("cssexp", {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, float, bool, or string).

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config = {}
  for item in items:
    if "=" not in item:
      log_warning(f"Ignoring invalid config format: '{escape(item)}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str

    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        if "." in val_str or "e" in val_str:
          final_val = float(val_str)
        else:
          final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
