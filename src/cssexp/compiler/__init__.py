"""
Compiler Package.

Defines the flat rule IR shared by the S-expression frontend and the CSS
backend. Parsing lives under ``frontends``; serialization under ``backends``.
"""

from cssexp.compiler.ir import CompiledDocument, Declaration, ResolvedRule, SelectorPath

__all__ = ["CompiledDocument", "Declaration", "ResolvedRule", "SelectorPath"]
