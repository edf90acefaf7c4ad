"""
Orchestration Engine for the CSS Compiler.

This module provides `CssEngine`, the driver that composes the pipeline stages:

1.  **Lexing**: `SexprLexer` turns raw text into tokens.
2.  **Parsing**: `SexprParser` builds the S-expression tree.
3.  **Interpretation**: `RuleInterpreter` flattens nested forms into resolved rules.
4.  **Emission**: `CssEmitter` serializes the rules as CSS text.

Any stage failure short-circuits the pipeline. `compile` lets the stage's
`CompileError` propagate unchanged; `CssEngine.run` captures it in a
`CompilationResult` for hosts that prefer a status object (e.g. the CLI).
"""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from cssexp.compiler.backends.css import CssEmitter
from cssexp.compiler.frontends.sexpr.interpreter import RuleInterpreter
from cssexp.compiler.frontends.sexpr.nodes import SexprNode
from cssexp.compiler.frontends.sexpr.parser import SexprParser
from cssexp.compiler.frontends.sexpr.tokens import SexprLexer
from cssexp.compiler.ir import CompiledDocument
from cssexp.config import RuntimeConfig
from cssexp.errors import CompileError

logger = logging.getLogger(__name__)


class CompilationResult(BaseModel):
  """
  Structured result of a single compilation.
  """

  css: str = Field(default="", description="The generated CSS text.")
  errors: List[str] = Field(default_factory=list, description="Error messages, empty on success.")
  success: bool = Field(default=True, description="True if the pipeline completed without failures.")
  error_kind: Optional[str] = Field(default=None, description="Class name of the error, e.g. 'DanglingProperty'.")
  rule_count: int = Field(default=0, description="Number of emitted rule blocks.")

  @property
  def has_errors(self) -> bool:
    """
    Returns True if any errors were recorded during compilation.

    Returns:
        bool: True if errors list is non-empty.
    """
    return len(self.errors) > 0


class CssEngine:
  """
  The main compilation unit.

  Stateless between calls: every `run` builds its own token list, tree and
  rule list, so one engine can be shared across threads.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Initializes the Engine.

    Args:
        config: Compiler options. Defaults to `RuntimeConfig()`.
    """
    self.config = config or RuntimeConfig()
    self.lexer = SexprLexer(inline_functions=self.config.inline_functions)
    self.interpreter = RuleInterpreter(
      combinator=self.config.combinator,
      list_values=self.config.list_values,
      selector_lists=self.config.selector_lists,
    )
    self.emitter = CssEmitter(indent=self.config.indent, rule_separator=self.config.rule_separator)

  def parse(self, text: str) -> List[SexprNode]:
    """
    Runs the lexer and parser only.

    Args:
        text: Raw source text.

    Returns:
        List[SexprNode]: Top-level forms.

    Raises:
        ParseError: On unbalanced parentheses.
    """
    return SexprParser(self.lexer.tokenize(text)).parse()

  def resolve(self, text: str) -> CompiledDocument:
    """
    Runs every stage except emission.

    Args:
        text: Raw source text.

    Returns:
        CompiledDocument: Resolved rules.

    Raises:
        CompileError: From any stage.
    """
    return self.interpreter.interpret(self.parse(text))

  def compile(self, text: str) -> str:
    """
    Compiles source text to CSS.

    Args:
        text: Raw source text.

    Returns:
        str: CSS text.

    Raises:
        CompileError: From any stage, unchanged.
    """
    doc = self.resolve(text)
    css = self.emitter.emit(doc)
    logger.debug("Emitted %d rules (%d chars)", len(doc), len(css))
    return css

  def run(self, text: str) -> CompilationResult:
    """
    Compiles source text, capturing failures in the result.

    Only `CompileError` is captured; anything else is a bug and propagates.

    Args:
        text: Raw source text.

    Returns:
        CompilationResult: CSS on success, error details on failure.
    """
    try:
      doc = self.resolve(text)
    except CompileError as e:
      logger.debug("Compilation failed: %s", e)
      return CompilationResult(success=False, errors=[str(e)], error_kind=e.kind)

    return CompilationResult(css=self.emitter.emit(doc), rule_count=len(doc))

  def compile_file(self, path: Path) -> CompilationResult:
    """
    Reads a UTF-8 source file (a leading byte-order mark is dropped) and compiles it.

    Args:
        path: Source file.

    Returns:
        CompilationResult: Result of `run` on the file contents.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "rt", encoding="utf-8-sig") as f:
      text = f.read()
    return self.run(text)


def compile(text: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Compiles Cascading Style S-Expressions into CSS text.

  Args:
      text (str): The source text.
      config (RuntimeConfig, optional): Compiler options.

  Returns:
      str: The CSS text.

  Raises:
      CompileError: The first failure of any stage (a `ParseError` for
          unbalanced parentheses), never wrapped.
  """
  return CssEngine(config).compile(text)
