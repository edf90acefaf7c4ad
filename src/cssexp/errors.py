"""
Compiler Error Taxonomy.

Every failure raised by the pipeline derives from `CompileError`, so a host can
catch all of them with a single ``except CompileError``. Parser failures are
grouped under `ParseError`.

All errors are terminal: compilation is a pure function of its input, so
retrying the same text always fails the same way.
"""

from typing import Optional


class CompileError(ValueError):
  """
  Base class for all compilation failures.

  Attributes:
      message (str): Human readable description without position info.
      line (Optional[int]): 1-based line of the offending token.
      column (Optional[int]): 1-based column of the offending token.
      fragment (Optional[str]): The offending source text, when there is one.
  """

  def __init__(
    self,
    message: str,
    line: Optional[int] = None,
    column: Optional[int] = None,
    fragment: Optional[str] = None,
  ):
    self.message = message
    self.line = line
    self.column = column
    self.fragment = fragment
    super().__init__(self._format())

  @property
  def kind(self) -> str:
    """The error kind, e.g. ``"DanglingProperty"``."""
    return type(self).__name__

  @property
  def position(self) -> str:
    """Position suffix used in messages (empty when unknown)."""
    if self.line is None:
      return ""
    if self.column is None:
      return f"line {self.line}"
    return f"line {self.line}, col {self.column}"

  def _format(self) -> str:
    text = f"{self.kind}: {self.message}"
    if self.fragment is not None:
      text += f" ('{self.fragment}')"
    if self.position:
      text += f" at {self.position}"
    return text


class ParseError(CompileError):
  """Structural failure while building the expression tree."""


class UnmatchedOpenParen(ParseError):
  """An opened List form was never closed before the end of input."""


class UnmatchedCloseParen(ParseError):
  """A close-paren appeared with no corresponding open List."""


class InvalidTopLevelForm(CompileError):
  """A bare Atom appeared at the top level where a selector form is required."""


class MissingSelector(CompileError):
  """A List form is empty or begins with a nested List instead of a selector."""


class DanglingProperty(CompileError):
  """A property Atom has no value before the end of its enclosing List."""


class InvalidValue(CompileError):
  """A List appeared where a scalar value Atom was expected."""


__all__ = [
  "CompileError",
  "ParseError",
  "UnmatchedOpenParen",
  "UnmatchedCloseParen",
  "InvalidTopLevelForm",
  "MissingSelector",
  "DanglingProperty",
  "InvalidValue",
]
