"""
Intermediate Representation (IR).

This module defines the flat rule structures produced by the Rule Interpreter
after walking the S-expression tree.

It acts as the contract between the Frontend (parsing and interpretation) and
the Backend (CSS emission).
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

SelectorPath = Tuple[str, ...]
"""Nesting chain of selector fragments from the document root, e.g. ``("body", "a")``."""


@dataclass(frozen=True)
class Declaration:
  """
  A single CSS property/value pair.
  """

  property: str
  """Property name (e.g. ``color``)."""

  value: str
  """Value text (e.g. ``red``)."""


@dataclass
class ResolvedRule:
  """
  A fully-qualified selector paired with the declarations of one nesting level.
  """

  selector: str
  """Flattened selector (e.g. ``body a``)."""

  declarations: List[Declaration] = field(default_factory=list)
  """Declarations in source order."""


@dataclass
class CompiledDocument:
  """
  Ordered sequence of resolved rules, in pre-order of discovery.
  """

  rules: List[ResolvedRule] = field(default_factory=list)
  """Parent rules precede the rules of their nested forms."""

  def __iter__(self) -> Iterator[ResolvedRule]:
    return iter(self.rules)

  def __len__(self) -> int:
    return len(self.rules)

  @property
  def selectors(self) -> List[str]:
    """Selectors of all rules, in emission order."""
    return [r.selector for r in self.rules]
