"""
cssexp Package.

A compiler from Cascading Style S-Expressions, a terse nested notation for
style rules, to flat CSS.

Usage
-----

Simple String Compilation
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import cssexp
    css = cssexp.compile("(body color red (a text-decoration underline))")
    print(css)
    # body {
    #   color: red;
    # }
    #
    # body a {
    #   text-decoration: underline;
    # }

Status Objects (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from cssexp import CssEngine, RuntimeConfig

    engine = CssEngine(RuntimeConfig(combinator=" > "))
    res = engine.run("(ul (li margin 0))")

    if res.success:
        print(res.css)
    else:
        print(f"Errors: {res.errors}")
"""

from cssexp.config import RuntimeConfig
from cssexp.core.engine import CompilationResult, CssEngine, compile
from cssexp.errors import (
  CompileError,
  DanglingProperty,
  InvalidTopLevelForm,
  InvalidValue,
  MissingSelector,
  ParseError,
  UnmatchedCloseParen,
  UnmatchedOpenParen,
)

__version__ = "0.1.0"

__all__ = [
  "compile",
  "CssEngine",
  "CompilationResult",
  "RuntimeConfig",
  "CompileError",
  "ParseError",
  "UnmatchedOpenParen",
  "UnmatchedCloseParen",
  "InvalidTopLevelForm",
  "MissingSelector",
  "DanglingProperty",
  "InvalidValue",
  "__version__",
]
