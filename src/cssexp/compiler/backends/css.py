"""
CSS Emitter (Backend).

Converts a `CompiledDocument` into CSS text.
"""

from cssexp.compiler.ir import CompiledDocument, ResolvedRule


class CssEmitter:
  """
  Serializes resolved rules into CSS rule blocks.

  The emitter is a structural serializer only: property and value text is
  written verbatim, without escaping or validation.

  Args:
      indent (str): Prefix for each declaration line. Defaults to two spaces.
      rule_separator (str): Text placed between consecutive rule blocks, after
          the closing brace's newline. The default ``"\\n"`` leaves one blank line.
  """

  def __init__(self, indent: str = "  ", rule_separator: str = "\n"):
    self.indent = indent
    self.rule_separator = rule_separator

  def emit(self, doc: CompiledDocument) -> str:
    """
    Generates the CSS source string for a document.

    Formatting Rules:
    - ``selector {`` on its own line.
    - One ``property: value;`` line per declaration, in order.
    - ``}`` on its own line.

    Args:
        doc (CompiledDocument): Resolved rules.

    Returns:
        str: The CSS text. Empty documents produce an empty string.
    """
    return self.rule_separator.join(self.emit_rule(rule) for rule in doc.rules)

  def emit_rule(self, rule: ResolvedRule) -> str:
    """Renders a single rule block, including its trailing newline."""
    lines = [f"{rule.selector} {{"]
    for decl in rule.declarations:
      lines.append(f"{self.indent}{decl.property}: {decl.value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def emit(doc: CompiledDocument, indent: str = "  ", rule_separator: str = "\n") -> str:
  """
  Convenience wrapper around `CssEmitter.emit`.

  Args:
      doc: Resolved rules.
      indent: See `CssEmitter`.
      rule_separator: See `CssEmitter`.

  Returns:
      str: The CSS text.
  """
  return CssEmitter(indent, rule_separator).emit(doc)
