"""
Main Entry Point for cssexp CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `cssexp.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from cssexp import __version__
from cssexp.cli import commands
from cssexp.config import parse_cli_key_values
from cssexp.utils.console import set_verbosity


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="cssexp: Cascading Style S-Expressions to CSS compiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging from compiler stages")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: COMPILE ---
  cmd_comp = subparsers.add_parser("compile", help="Compile a source file or directory to CSS")
  cmd_comp.add_argument("path", type=Path, help="Input source file or directory")
  cmd_comp.add_argument("--out", type=Path, help="Output destination (file or dir). Defaults to stdout for files.")
  cmd_comp.add_argument("--combinator", default=None, help="Selector combinator (default: ' ', e.g. ' > ')")
  cmd_comp.add_argument("--indent", type=int, default=None, help="Declaration indent width in spaces (default: 2)")
  cmd_comp.add_argument(
    "--inline-functions",
    action="store_true",
    default=None,
    help="Keep name(...) groups inside atoms, e.g. var(--x, red)",
  )
  cmd_comp.add_argument(
    "--list-values",
    action="store_true",
    default=None,
    help="Accept (a b c) after a property as the value 'a b c'",
  )
  cmd_comp.add_argument(
    "--selector-lists",
    action="store_true",
    default=None,
    help="Expand comma-separated selector fragments (h1,h2)",
  )
  cmd_comp.add_argument(
    "--config",
    nargs="*",
    help="Extra settings in key=value format (e.g. rule_separator= source_suffix=.sx)",
  )

  # --- Command: TREE ---
  cmd_tree = subparsers.add_parser("tree", help="Print the parsed S-expression tree of a file")
  cmd_tree.add_argument("path", type=Path, help="Input source file")
  cmd_tree.add_argument("--inline-functions", action="store_true", default=None, help="Keep name(...) groups inside atoms")

  args = parser.parse_args(argv)
  set_verbosity(args.verbose)

  if args.command == "compile":
    overrides = parse_cli_key_values(args.config)
    return commands.handle_compile(
      args.path,
      args.out,
      combinator=args.combinator,
      indent=args.indent,
      inline_functions=args.inline_functions,
      list_values=args.list_values,
      selector_lists=args.selector_lists,
      overrides=overrides,
    )

  elif args.command == "tree":
    return commands.handle_tree(args.path, args.inline_functions)

  return 0


if __name__ == "__main__":
  sys.exit(main())
