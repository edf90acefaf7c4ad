"""
S-Expression Tree Nodes.

Defines the generic expression tree produced by the parser. The tree is a
closed variant: every node is either an `Atom` (bare text) or an `SList`
(an ordered sequence of child nodes). Each node implements `__str__` to emit
its S-expression source form.

Source positions are carried for diagnostics only and do not take part in
equality, so trees built by hand compare equal to parsed ones.
"""

import abc
from dataclasses import dataclass, field
from typing import List, Optional


class SexprNode(abc.ABC):
  """Abstract base class for all S-expression tree nodes."""

  line: Optional[int]
  column: Optional[int]

  @abc.abstractmethod
  def __str__(self) -> str:
    """Returns the S-expression source representation of the node."""
    pass


@dataclass
class Atom(SexprNode):
  """
  A bare symbol, e.g. a selector fragment, property name or value.

  Attributes:
      text (str): The raw atom text.
      line (Optional[int]): 1-based source line.
      column (Optional[int]): 1-based source column.
  """

  text: str
  line: Optional[int] = field(default=None, compare=False)
  column: Optional[int] = field(default=None, compare=False)

  def __str__(self) -> str:
    return self.text


@dataclass
class SList(SexprNode):
  """
  A parenthesized list of child nodes, in source order.

  Attributes:
      children (List[SexprNode]): Owned child nodes. May be empty.
      line (Optional[int]): 1-based line of the opening parenthesis.
      column (Optional[int]): 1-based column of the opening parenthesis.
  """

  children: List[SexprNode] = field(default_factory=list)
  line: Optional[int] = field(default=None, compare=False)
  column: Optional[int] = field(default=None, compare=False)

  def __str__(self) -> str:
    parts: List[str] = []
    # Pending items are nodes or literal separators, rendered right to left
    pending: List[object] = [self]
    while pending:
      item = pending.pop()
      if isinstance(item, str):
        parts.append(item)
      elif isinstance(item, Atom):
        parts.append(item.text)
      else:
        parts.append("(")
        pending.append(")")
        for i in range(len(item.children) - 1, -1, -1):
          pending.append(item.children[i])
          if i:
            pending.append(" ")
    return "".join(parts)

  @property
  def head(self) -> Optional[SexprNode]:
    """The first child, or None for an empty list."""
    return self.children[0] if self.children else None
