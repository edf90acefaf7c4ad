"""
Tests for the rule IR containers.
"""

import dataclasses

import pytest
from cssexp.compiler.ir import CompiledDocument, Declaration, ResolvedRule


def test_declaration_is_immutable():
  decl = Declaration("color", "red")
  with pytest.raises(dataclasses.FrozenInstanceError):
    decl.value = "blue"


def test_document_iteration_and_len():
  rules = [ResolvedRule("a", [Declaration("x", "1")]), ResolvedRule("b", [Declaration("y", "2")])]
  doc = CompiledDocument(rules)
  assert len(doc) == 2
  assert list(doc) == rules
  assert doc.selectors == ["a", "b"]


def test_default_containers_are_not_shared():
  first = ResolvedRule("a")
  second = ResolvedRule("b")
  first.declarations.append(Declaration("x", "1"))
  assert second.declarations == []
  assert CompiledDocument().rules is not CompiledDocument().rules
