"""
Tree Command Handler.

Parses a source file without interpreting it and prints the S-expression tree,
which helps when a form is paired differently than intended.
"""

from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError
from rich.markup import escape
from rich.tree import Tree

from cssexp.compiler.frontends.sexpr.nodes import Atom, SexprNode
from cssexp.config import RuntimeConfig
from cssexp.core.engine import CssEngine
from cssexp.errors import CompileError
from cssexp.utils.console import log_error, make_output_console


def handle_tree(input_path: Path, inline_functions: Optional[bool] = None) -> int:
  """
  Handles the 'tree' command execution.

  Lexing options come from the same ``[tool.cssexp]`` lookup as `compile`, so
  both commands split the file into the same tokens.

  Args:
      input_path: Source file.
      inline_functions: Override for inline function lexing.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {escape(str(input_path))}")
    return 1

  try:
    config = RuntimeConfig.load(inline_functions=inline_functions, search_path=input_path.parent)
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  engine = CssEngine(config)
  try:
    text = input_path.read_text(encoding="utf-8-sig")
    roots = engine.parse(text)
  except (OSError, UnicodeDecodeError, CompileError) as e:
    log_error(f"{escape(str(input_path))}: {escape(str(e))}")
    return 1

  make_output_console().print(build_tree(input_path.name, roots))
  return 0


def build_tree(title: str, roots: List[SexprNode]) -> Tree:
  """
  Builds a rich Tree mirroring the parsed forms.

  Args:
      title: Label of the root node.
      roots: Top-level nodes.

  Returns:
      Tree: Renderable tree.
  """
  tree = Tree(f"[path]{escape(title)}[/path]")
  pending: List[Tuple[Tree, SexprNode]] = [(tree, node) for node in reversed(roots)]
  while pending:
    parent, node = pending.pop()
    if isinstance(node, Atom):
      parent.add(f"[atom]{escape(node.text)}[/atom]")
      continue

    head = node.head
    if isinstance(head, Atom):
      branch = parent.add(f"[selector]({escape(head.text)}[/selector] …)")
      rest = node.children[1:]
    else:
      branch = parent.add("[dim]( )[/dim]")
      rest = node.children
    pending.extend((branch, child) for child in reversed(rest))
  return tree
