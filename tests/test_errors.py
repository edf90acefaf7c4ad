"""
Tests for the Compile Error Taxonomy.
"""

import pytest
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


@pytest.mark.parametrize("cls", [UnmatchedOpenParen, UnmatchedCloseParen])
def test_parse_errors_hierarchy(cls):
  assert issubclass(cls, ParseError)
  assert issubclass(cls, CompileError)


@pytest.mark.parametrize("cls", [InvalidTopLevelForm, MissingSelector, DanglingProperty, InvalidValue])
def test_interpreter_errors_hierarchy(cls):
  assert issubclass(cls, CompileError)
  assert not issubclass(cls, ParseError)


def test_compile_error_is_value_error():
  assert issubclass(CompileError, ValueError)


def test_message_with_position_and_fragment():
  err = DanglingProperty("property has no value", line=3, column=7, fragment="color")
  assert err.kind == "DanglingProperty"
  assert err.position == "line 3, col 7"
  assert str(err) == "DanglingProperty: property has no value ('color') at line 3, col 7"


def test_message_without_position():
  err = MissingSelector("form is empty")
  assert err.position == ""
  assert str(err) == "MissingSelector: form is empty"


def test_line_only_position():
  assert InvalidValue("bad", line=2).position == "line 2"
