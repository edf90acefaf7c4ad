from .compile import handle_compile, _compile_single_file, _print_batch_summary
from .tree import handle_tree, build_tree

__all__ = [
  "_compile_single_file",
  "_print_batch_summary",
  "build_tree",
  "handle_compile",
  "handle_tree",
]
