"""
S-Expression Parser Implementation.

This module provides `SexprParser`, which converts a stream of tokens (from
`SexprLexer`) into the generic expression tree defined in `nodes.py`.

- ``(`` starts a new `SList`; children are read until the matching ``)``.
- An atom becomes an `Atom` in the enclosing list, or a top-level node when no
  list is open.
- Unbalanced parentheses raise `UnmatchedOpenParen` / `UnmatchedCloseParen`.

Open lists are kept on an explicit stack, so nesting depth is bounded by
memory rather than by the interpreter's recursion limit.
"""

import logging
from typing import Iterable, List, Tuple

from cssexp.compiler.frontends.sexpr.nodes import Atom, SexprNode, SList
from cssexp.compiler.frontends.sexpr.tokens import Token, TokenType
from cssexp.errors import UnmatchedCloseParen, UnmatchedOpenParen

logger = logging.getLogger(__name__)


class SexprParser:
  """
  Stack-based parser for Cascading Style S-Expressions.
  """

  def __init__(self, tokens: Iterable[Token]):
    """
    Initialize the parser.

    Args:
        tokens: Token stream, typically from `SexprLexer.tokenize`.
    """
    self.tokens = list(tokens)

  def parse(self) -> List[SexprNode]:
    """
    Parses the whole token stream.

    Returns:
        One node per top-level form, in source order.

    Raises:
        UnmatchedOpenParen: If input ends while a list is still open.
        UnmatchedCloseParen: If a ``)`` has no corresponding ``(``.
    """
    roots: List[SexprNode] = []
    # (opening token, list being filled), innermost last
    stack: List[Tuple[Token, SList]] = []

    for token in self.tokens:
      if token.kind == TokenType.LPAREN:
        stack.append((token, SList(line=token.line, column=token.column)))
        continue

      if token.kind == TokenType.RPAREN:
        if not stack:
          raise UnmatchedCloseParen(
            "close-paren has no matching open-paren",
            line=token.line,
            column=token.column,
            fragment=token.value,
          )
        _, node = stack.pop()
      else:
        node = Atom(token.value, line=token.line, column=token.column)

      if stack:
        stack[-1][1].children.append(node)
      else:
        roots.append(node)

    if stack:
      opener, _ = stack[-1]
      raise UnmatchedOpenParen(
        "list is never closed",
        line=opener.line,
        column=opener.column,
        fragment=opener.value,
      )

    logger.debug("Parsed %d top-level forms from %d tokens", len(roots), len(self.tokens))
    return roots


def parse(tokens: Iterable[Token]) -> List[SexprNode]:
  """
  Convenience wrapper around `SexprParser.parse`.

  Args:
      tokens: Token stream.

  Returns:
      List[SexprNode]: The top-level nodes of the document.
  """
  return SexprParser(tokens).parse()
