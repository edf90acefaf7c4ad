"""
S-Expression Tokenizer Definition.

Provides `SexprLexer`, which decomposes raw Cascading Style S-Expression
source into a lazy stream of typed `Token` objects.

There are only three token kinds: open-paren, close-paren and atom. Atoms are
maximal runs of characters that are neither whitespace nor parentheses, so
selector and value text such as ``#main``, ``a:hover`` or ``12px`` passes
through verbatim. The lexer is total; structural problems such as unbalanced
parentheses are reported by the parser.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generator, List, Tuple


class TokenType(Enum):
  """Enumeration of S-expression token types."""

  LPAREN = auto()  # (
  RPAREN = auto()  # )
  ATOM = auto()  # body, color, 12px, var(--x, red)


@dataclass
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind (TokenType): The type of token.
      value (str): The raw string content.
      line (int): Line number in source (1-based).
      column (int): Column number in source (1-based).
  """

  kind: TokenType
  value: str
  line: int
  column: int


class SexprLexer:
  """
  Tokenizer for Cascading Style S-Expressions.

  Args:
      inline_functions (bool): If True, a ``(`` directly following atom
          characters opens a balanced group that stays inside the atom
          (e.g. ``var(--text-color, red)``), whitespace included.
  """

  # Order matters: parentheses before the atom catch-all
  PATTERNS: List[Tuple[TokenType, str]] = [
    (TokenType.LPAREN, r"\("),
    (TokenType.RPAREN, r"\)"),
    (TokenType.ATOM, r"[^\s()]+"),
  ]

  def __init__(self, inline_functions: bool = False) -> None:
    self.inline_functions = inline_functions
    self.regex_pairs = [(kind, re.compile(pattern)) for kind, pattern in self.PATTERNS]
    self._whitespace = re.compile(r"\s+")

  def tokenize(self, text: str) -> Generator[Token, None, None]:
    """
    Tokenizes the input string.

    Each call returns a fresh generator, so the stream can be restarted by
    calling `tokenize` again.

    Args:
        text (str): Raw source text.

    Yields:
        Token: Token objects in source order.
    """
    pos = 0
    line_num = 1
    line_start = 0
    length = len(text)

    while pos < length:
      match_ws = self._whitespace.match(text, pos)
      if match_ws:
        ws_str = match_ws.group(0)
        newlines = ws_str.count("\n")
        if newlines > 0:
          line_num += newlines
          line_start = pos + ws_str.rfind("\n") + 1
        pos = match_ws.end()
        continue

      column = pos - line_start + 1
      for kind, regex in self.regex_pairs:
        match = regex.match(text, pos)
        if match:
          break

      val = match.group(0)
      end = match.end()

      if kind == TokenType.ATOM and self.inline_functions:
        end = self._extend_inline_group(text, end)
        val = text[pos:end]

      yield Token(kind, val, line_num, column)

      # Inline groups may span lines
      newlines = val.count("\n")
      if newlines > 0:
        line_num += newlines
        line_start = pos + val.rfind("\n") + 1
      pos = end

  def _extend_inline_group(self, text: str, end: int) -> int:
    """
    Extends an atom over balanced ``(...)`` groups attached to it.

    Args:
        text (str): Full source text.
        end (int): Index just past the plain atom characters.

    Returns:
        int: Index just past the extended atom.
    """
    depth = 0
    pos = end
    length = len(text)
    while pos < length:
      c = text[pos]
      if c == "(":
        depth += 1
      elif c == ")":
        if depth == 0:
          break
        depth -= 1
      elif c.isspace() and depth == 0:
        break
      pos += 1
    return pos


def tokenize(text: str, inline_functions: bool = False) -> Generator[Token, None, None]:
  """
  Convenience wrapper around `SexprLexer.tokenize`.

  Args:
      text (str): Raw source text.
      inline_functions (bool): See `SexprLexer`.

  Returns:
      Generator[Token, None, None]: Lazy token stream.
  """
  return SexprLexer(inline_functions=inline_functions).tokenize(text)
