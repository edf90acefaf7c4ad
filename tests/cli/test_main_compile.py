"""
Tests for the CLI 'compile' Command.

Verifies that:
1. A single file compiles to stdout or to --out.
2. Compile errors exit non-zero, write nothing, and report on stderr.
3. Directory input mirrors the tree into --out as .css files.
4. Flags and pyproject settings reach the engine.
"""

from unittest.mock import patch

import pytest
from cssexp.cli.__main__ import main
from cssexp import __version__


def test_compile_file_to_stdout(tmp_path, capsys):
  src = tmp_path / "site.cssx"
  src.write_text("(body color red (a text-decoration underline))")

  assert main(["compile", str(src)]) == 0

  captured = capsys.readouterr()
  assert captured.out == "body {\n  color: red;\n}\n\nbody a {\n  text-decoration: underline;\n}\n"


def test_compile_file_to_out(tmp_path):
  src = tmp_path / "site.cssx"
  src.write_text("(nav (a color blue))")
  out = tmp_path / "build" / "site.css"

  assert main(["compile", str(src), "--out", str(out)]) == 0
  assert out.read_text() == "nav a {\n  color: blue;\n}\n"


def test_compile_error_exit_code(tmp_path, capsys):
  src = tmp_path / "bad.cssx"
  src.write_text("(body color)")
  out = tmp_path / "bad.css"

  assert main(["compile", str(src), "--out", str(out)]) == 1
  assert not out.exists()

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "DanglingProperty" in captured.err


def test_compile_error_keeps_brackets_in_message(tmp_path, capsys):
  """Fragments that look like rich markup are printed literally."""
  src = tmp_path / "bad.cssx"
  src.write_text("(a[href] color)")

  assert main(["compile", str(src)]) == 1
  assert "'a[href]'" in capsys.readouterr().err


def test_compile_missing_input(tmp_path, capsys):
  assert main(["compile", str(tmp_path / "nope.cssx")]) == 1
  assert "Input not found" in capsys.readouterr().err


def test_compile_flags(tmp_path, capsys):
  src = tmp_path / "site.cssx"
  src.write_text("(ul (li,dt margin (0 auto) color var(--fg, black)))")

  code = main(
    [
      "compile",
      str(src),
      "--combinator",
      " > ",
      "--indent",
      "4",
      "--list-values",
      "--selector-lists",
      "--inline-functions",
    ]
  )

  assert code == 0
  assert capsys.readouterr().out == "ul > li, ul > dt {\n    margin: 0 auto;\n    color: var(--fg, black);\n}\n"


def test_compile_config_key_values(tmp_path, capsys):
  src = tmp_path / "site.cssx"
  src.write_text("(a x 1)(b y 2)")

  assert main(["compile", str(src), "--config", "rule_separator=", "indent=1"]) == 0
  assert capsys.readouterr().out == "a {\n x: 1;\n}\nb {\n y: 2;\n}\n"


def test_compile_reads_pyproject(tmp_path, capsys):
  (tmp_path / "pyproject.toml").write_text('[tool.cssexp]\ncombinator = " > "\n')
  src = tmp_path / "site.cssx"
  src.write_text("(ul (li margin 0))")

  assert main(["compile", str(src)]) == 0
  assert capsys.readouterr().out.startswith("ul > li {")


def test_compile_invalid_config(tmp_path, capsys):
  src = tmp_path / "site.cssx"
  src.write_text("(a x 1)")

  assert main(["compile", str(src), "--config", "source_suffix=css"]) == 1
  assert "Invalid configuration" in capsys.readouterr().err


def test_compile_directory(tmp_path, capsys):
  in_root = tmp_path / "src"
  (in_root / "pages").mkdir(parents=True)
  (in_root / "base.cssx").write_text("(body margin 0)")
  (in_root / "pages" / "home.cssx").write_text("(main (h1 font-size 2em))")
  (in_root / "notes.txt").write_text("ignored")
  out_root = tmp_path / "dist"

  assert main(["compile", str(in_root), "--out", str(out_root)]) == 0

  assert (out_root / "base.css").read_text() == "body {\n  margin: 0;\n}\n"
  assert (out_root / "pages" / "home.css").read_text() == "main h1 {\n  font-size: 2em;\n}\n"
  assert not (out_root / "notes.css").exists()
  assert "Batch Complete: 2/2" in capsys.readouterr().err


def test_compile_directory_reports_failures(tmp_path, capsys):
  in_root = tmp_path / "src"
  in_root.mkdir()
  (in_root / "good.cssx").write_text("(p color red)")
  (in_root / "bad.cssx").write_text("(p color red")
  out_root = tmp_path / "dist"

  assert main(["compile", str(in_root), "--out", str(out_root)]) == 1

  assert (out_root / "good.css").exists()
  assert not (out_root / "bad.css").exists()
  err = capsys.readouterr().err
  assert "Compilation Report" in err
  assert "UnmatchedOpenParen" in err


def test_compile_directory_requires_out(tmp_path, capsys):
  assert main(["compile", str(tmp_path)]) == 1
  assert "requires --out" in capsys.readouterr().err


def test_compile_directory_empty(tmp_path, capsys):
  (tmp_path / "src").mkdir()
  assert main(["compile", str(tmp_path / "src"), "--out", str(tmp_path / "dist")]) == 0
  assert "No .cssx files" in capsys.readouterr().err


@patch("cssexp.cli.commands.handle_compile")
def test_compile_dispatch_arguments(mock_handle, tmp_path):
  mock_handle.return_value = 0
  main(["compile", "in.cssx", "--selector-lists"])

  mock_handle.assert_called_once()
  kwargs = mock_handle.call_args.kwargs
  assert kwargs["selector_lists"] is True
  assert kwargs["list_values"] is None
  assert kwargs["combinator"] is None


def test_version(capsys):
  with pytest.raises(SystemExit) as exc:
    main(["--version"])
  assert exc.value.code == 0
  assert __version__ in capsys.readouterr().out


def test_verbose_enables_debug_logs(tmp_path, capsys):
  src = tmp_path / "site.cssx"
  src.write_text("(a x 1)")

  assert main(["-v", "compile", str(src)]) == 0
  assert "Resolved 1 rules" in capsys.readouterr().err
