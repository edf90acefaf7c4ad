"""
Rule Interpreter.

Walks the parsed S-expression tree under an accumulated selector path and
flattens it into an ordered list of `ResolvedRule` objects.

Within a list form the first atom is the selector fragment. The remaining
children are classified with one-token lookahead:

- a list is a nested rule, interpreted under ``path + (fragment,)``;
- an atom is a property, and the child right after it is its value.

A level with declarations yields one rule, placed before every rule produced
by its nested forms. A level without declarations (a grouping node such as
``(nav (a color blue))``) yields no rule but still extends the path.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from cssexp.compiler.frontends.sexpr.nodes import Atom, SexprNode, SList
from cssexp.compiler.ir import CompiledDocument, Declaration, ResolvedRule, SelectorPath
from cssexp.errors import (
  DanglingProperty,
  InvalidTopLevelForm,
  InvalidValue,
  MissingSelector,
)

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
  """One open list form during flattening."""

  head: Atom
  path: SelectorPath
  children: List[SexprNode]
  rule: ResolvedRule
  slot: int
  index: int = 0


class RuleInterpreter:
  """
  Converts top-level S-expression forms into a `CompiledDocument`.

  Args:
      combinator (str): Separator placed between path fragments. Defaults to
          a single space (the descendant combinator).
      list_values (bool): If True, a list following a property is accepted as a
          multi-part value and its atoms are joined with spaces.
      selector_lists (bool): If True, fragments containing commas are split
          into alternatives and combined with every parent alternative.
  """

  def __init__(self, combinator: str = " ", list_values: bool = False, selector_lists: bool = False):
    self.combinator = combinator
    self.list_values = list_values
    self.selector_lists = selector_lists

  def interpret(self, roots: Sequence[SexprNode]) -> CompiledDocument:
    """
    Flattens a document.

    Args:
        roots: Top-level nodes from the parser.

    Returns:
        CompiledDocument: Resolved rules in pre-order.

    Raises:
        InvalidTopLevelForm: If a root is a bare atom.
        MissingSelector: If a list is empty or starts with a list.
        DanglingProperty: If a property has no value.
        InvalidValue: If a value position holds a list.
    """
    rules: List[ResolvedRule] = []
    for root in roots:
      if isinstance(root, Atom):
        raise InvalidTopLevelForm(
          "top-level forms must be selector lists",
          line=root.line,
          column=root.column,
          fragment=root.text,
        )
      self._interpret_list(root, rules)

    logger.debug("Resolved %d rules from %d top-level forms", len(rules), len(roots))
    return CompiledDocument(rules=rules)

  def _interpret_list(self, root: SList, rules: List[ResolvedRule]) -> None:
    """
    Flattens one top-level form.

    Nested forms are walked with an explicit stack of frames; each frame keeps
    the position of the rule slot it reserved and the index of the next child
    to classify.
    """
    stack = [self._open_level(root, (), rules)]
    while stack:
      frame = stack[-1]
      children = frame.children

      if frame.index >= len(children):
        stack.pop()
        if not frame.rule.declarations:
          rules.pop(frame.slot)
        continue

      child = children[frame.index]
      if isinstance(child, SList):
        frame.index += 1
        stack.append(self._open_level(child, frame.path, rules))
        continue

      if frame.index + 1 >= len(children):
        raise DanglingProperty(
          f"property has no value in '{frame.head.text}'",
          line=child.line,
          column=child.column,
          fragment=child.text,
        )
      value = self._resolve_value(child, children[frame.index + 1])
      frame.rule.declarations.append(Declaration(property=child.text, value=value))
      frame.index += 2

  def _open_level(self, node: SList, path: SelectorPath, rules: List[ResolvedRule]) -> _Frame:
    head = node.head
    if head is None:
      raise MissingSelector("form is empty", line=node.line, column=node.column, fragment=str(node))
    if not isinstance(head, Atom):
      raise MissingSelector(
        "form begins with a nested list instead of a selector",
        line=head.line,
        column=head.column,
        fragment=str(head),
      )

    current = path + (head.text,)
    rule = ResolvedRule(selector=self.resolve_selector(current, head))

    # Reserve the slot so this level's rule precedes its nested rules
    slot = len(rules)
    rules.append(rule)
    return _Frame(head=head, path=current, children=node.children[1:], rule=rule, slot=slot)

  def _resolve_value(self, prop: Atom, node: SexprNode) -> str:
    if isinstance(node, Atom):
      return node.text

    if self.list_values and node.children and all(isinstance(c, Atom) for c in node.children):
      return " ".join(c.text for c in node.children)

    raise InvalidValue(
      f"value of '{prop.text}' must be an atom",
      line=node.line,
      column=node.column,
      fragment=str(node),
    )

  def resolve_selector(self, path: SelectorPath, head: Atom) -> str:
    """
    Joins a selector path into the final selector text.

    With `selector_lists` enabled, the result is the cross product of every
    fragment's comma-separated alternatives, joined with ``", "``.

    Args:
        path: Fragments from the root down to the current level.
        head: The atom that introduced the last fragment (used for errors).

    Returns:
        str: The flattened selector.
    """
    if not self.selector_lists:
      return self.combinator.join(path)

    combos: List[SelectorPath] = [()]
    for fragment in path:
      alternatives = [alt for alt in fragment.split(",") if alt]
      combos = [combo + (alt,) for combo in combos for alt in alternatives]

    if not combos:
      raise MissingSelector(
        "selector list has no alternatives",
        line=head.line,
        column=head.column,
        fragment=head.text,
      )
    return ", ".join(self.combinator.join(combo) for combo in combos)


def interpret(
  roots: Sequence[SexprNode],
  combinator: str = " ",
  list_values: bool = False,
  selector_lists: bool = False,
) -> CompiledDocument:
  """
  Convenience wrapper around `RuleInterpreter.interpret`.

  Args:
      roots: Top-level nodes from the parser.
      combinator: See `RuleInterpreter`.
      list_values: See `RuleInterpreter`.
      selector_lists: See `RuleInterpreter`.

  Returns:
      CompiledDocument: Resolved rules in pre-order.
  """
  return RuleInterpreter(combinator, list_values, selector_lists).interpret(roots)
