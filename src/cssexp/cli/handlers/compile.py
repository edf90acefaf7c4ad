"""
Compile Command Handler.

This module implements the logic for the `cssexp compile` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Compilation of a single file or a whole directory tree.
3. Output writing (file or stdout) and a failure summary.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from cssexp.config import RuntimeConfig
from cssexp.core.engine import CompilationResult, CssEngine
from cssexp.utils.console import console, log_error, log_info, log_success, log_warning


def handle_compile(
  input_path: Path,
  output_path: Optional[Path],
  combinator: Optional[str] = None,
  indent: Optional[int] = None,
  inline_functions: Optional[bool] = None,
  list_values: Optional[bool] = None,
  selector_lists: Optional[bool] = None,
  overrides: Optional[Dict[str, Any]] = None,
) -> int:
  """
  Handles the 'compile' command execution.

  Args:
      input_path: Source file or directory.
      output_path: Destination file (or directory for directory input).
          A single file is written to stdout when omitted.
      combinator: Override for the selector combinator.
      indent: Override for the declaration indent width.
      inline_functions: Override for inline function lexing.
      list_values: Override for list value support.
      selector_lists: Override for selector list expansion.
      overrides: Generic ``--config key=value`` overrides.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {escape(str(input_path))}")
    return 1

  try:
    config = RuntimeConfig.load(
      combinator=combinator,
      indent=indent,
      inline_functions=inline_functions,
      list_values=list_values,
      selector_lists=selector_lists,
      overrides=overrides,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  engine = CssEngine(config)

  if input_path.is_file():
    result = _compile_single_file(input_path, output_path, engine)
    return 0 if result.success else 1

  if not output_path:
    log_error("Directory compilation requires --out destination directory.")
    return 1

  sources = sorted(input_path.rglob(f"*{config.source_suffix}"))
  if not sources:
    log_warning(f"No {config.source_suffix} files found in {escape(str(input_path))}")
    return 0

  log_info(f"Processing {len(sources)} files from [path]{escape(str(input_path))}[/path]...")

  batch_results: Dict[str, CompilationResult] = {}
  for src_file in sources:
    rel_path = src_file.relative_to(input_path)
    dest_file = (output_path / rel_path).with_suffix(".css")
    batch_results[str(rel_path)] = _compile_single_file(src_file, dest_file, engine)

  _print_batch_summary(batch_results)
  return 0 if all(r.success for r in batch_results.values()) else 1


def _compile_single_file(
  input_path: Path,
  output_path: Optional[Path],
  engine: CssEngine,
) -> CompilationResult:
  """
  Helper to compile a single file and write its output.

  Args:
      input_path: Source file path.
      output_path: Destination file path, or None for stdout.
      engine: Configured engine.

  Returns:
      CompilationResult: Result object containing status and CSS.
  """
  try:
    result = engine.compile_file(input_path)
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {escape(str(input_path))}: {escape(str(e))}")
    return CompilationResult(success=False, errors=[str(e)], error_kind=type(e).__name__)

  if not result.success:
    for err in result.errors:
      log_error(f"{escape(str(input_path))}: {escape(err)}")
    return result

  if output_path:
    try:
      output_path.parent.mkdir(parents=True, exist_ok=True)
      with open(output_path, "wt", encoding="utf-8") as f:
        f.write(result.css)
    except OSError as e:
      log_error(f"Failed to write {escape(str(output_path))}: {escape(str(e))}")
      return CompilationResult(success=False, errors=[str(e)], error_kind=type(e).__name__)
    log_success(f"Compiled: [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  else:
    sys.stdout.write(result.css)

  return result


def _print_batch_summary(results: Dict[str, CompilationResult]) -> None:
  """
  Renders a summary table of compilation results to the console.

  Args:
      results: Dictionary mapping filenames to compilation results.
  """
  total = len(results)
  successes = sum(1 for r in results.values() if r.success)
  failures = total - successes

  if failures == 0:
    log_success(f"Batch Complete: {successes}/{total} files compiled.")
    return

  table = Table(title="Compilation Report")
  table.add_column("File", style="cyan")
  table.add_column("Error", justify="center")
  table.add_column("Details", style="red")

  for filename, res in results.items():
    if res.success:
      continue
    details = "; ".join(res.errors) if res.errors else "Unknown Error"
    table.add_row(escape(filename), res.error_kind or "Failed", escape(details))

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {successes} Passed, {failures} Failed.")
