"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so log capture in one test does not leak into another.
- Small helpers for compiling snippets.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'cssexp' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from cssexp.config import RuntimeConfig  # noqa: E402
from cssexp.core.engine import CssEngine  # noqa: E402
from cssexp.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """
  Ensures the console proxy and logging level are restored after each test,
  even when a test injects a capture console or enables verbose mode.
  """
  reset_console()
  yield
  reset_console()


@pytest.fixture
def engine():
  """Engine with default configuration."""
  return CssEngine(RuntimeConfig())


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
  """
  Runs the test from an empty directory so no ancestor pyproject.toml
  leaks [tool.cssexp] settings into RuntimeConfig.load().
  """
  work = tmp_path / "work"
  work.mkdir()
  monkeypatch.chdir(work)
  return work
