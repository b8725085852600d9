"""Tests for LaTeX escaping."""

from apatext.latex import escape_latex


def test_escapes_special_characters():
    assert escape_latex("50%") == "50\\%"
    assert escape_latex("a_b & {c}") == "a\\_b \\& \\{c\\}"
    assert escape_latex("#$") == "\\#\\$"
    assert escape_latex("~") == "\\textasciitilde{}"
    assert escape_latex("x^2") == "x\\textasciicircum{}2"


def test_backslash_is_escaped_once():
    assert escape_latex("a\\b") == "a\\textbackslash{}b"
    assert escape_latex("\\{") == "\\textbackslash{}\\{"


def test_newlines():
    text = "a\nb\n\nc"
    assert escape_latex(text) == text
    assert escape_latex(text, newlines=True) == "a\\\\b\n\nc"


def test_spaces():
    assert escape_latex("a  b") == "a  b"
    assert escape_latex("a  b", spaces=True) == "a\\ \\ b"


def test_vectorized():
    assert escape_latex(["50%", "a_b"]) == ["50\\%", "a\\_b"]
