"""
CLI Command Handlers Facade.

Re-exports handlers from `cssexp.cli.handlers` so the dispatcher (and tests
patching it) have a single import point.
"""

from cssexp.cli.handlers.compile import (
  handle_compile,
  _compile_single_file,
  _print_batch_summary,
)
from cssexp.cli.handlers.tree import handle_tree
