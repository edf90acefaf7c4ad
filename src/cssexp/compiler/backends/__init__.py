"""
Backends Package.

Serializers that turn the resolved rule IR into output text.
"""

from cssexp.compiler.backends.css import CssEmitter, emit

__all__ = ["CssEmitter", "emit"]
