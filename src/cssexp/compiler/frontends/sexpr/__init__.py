"""
S-Expression Frontend (Lexer, Parser & Rule Interpreter).

Handles tokenizing Cascading Style S-Expression text, parsing it into a generic
expression tree, and flattening that tree into resolved CSS rules.
"""

from cssexp.compiler.frontends.sexpr.nodes import Atom, SexprNode, SList
from cssexp.compiler.frontends.sexpr.tokens import SexprLexer, Token, TokenType, tokenize
from cssexp.compiler.frontends.sexpr.parser import SexprParser, parse
from cssexp.compiler.frontends.sexpr.interpreter import RuleInterpreter, interpret

__all__ = [
  "Atom",
  "SexprNode",
  "SList",
  "SexprLexer",
  "Token",
  "TokenType",
  "tokenize",
  "SexprParser",
  "parse",
  "RuleInterpreter",
  "interpret",
]
