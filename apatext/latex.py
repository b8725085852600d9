"""Escape text for LaTeX output."""

from __future__ import annotations

import re
from typing import List, Sequence, Union

from .validation import validate

_SPECIAL = re.compile(r"([#$%&_{}])")
_SOLITARY_NEWLINE = re.compile(r"(?<!\n)\n(?!\n)")


def _escape(text: str, newlines: bool, spaces: bool) -> str:
    # Backslashes must be handled before the other specials.
    text = text.replace("\\", "\\textbackslash")
    text = _SPECIAL.sub(r"\\\1", text)
    text = text.replace("\\textbackslash", "\\textbackslash{}")
    text = text.replace("~", "\\textasciitilde{}")
    text = text.replace("^", "\\textasciicircum{}")
    if newlines:
        text = _SOLITARY_NEWLINE.sub(r"\\\\", text)
    if spaces:
        text = text.replace("  ", "\\ \\ ")
    return text


def escape_latex(
    x: Union[str, Sequence[str]], newlines: bool = False, spaces: bool = False
) -> Union[str, List[str]]:
    """Escape LaTeX special characters.

    Args:
        x: Text, or a list of texts.
        newlines (bool, optional): Replace single newlines with ``\\\\``.
            Double newlines (paragraph breaks) are kept. Defaults to ``False``.
        spaces (bool, optional): Replace double spaces with ``\\ \\ ``.
            Defaults to ``False``.

    Returns:
        The escaped text, or a list of escaped texts.
    """
    validate(x, "x", check_class="character")
    validate(newlines, "newlines", check_class="logical", check_length=1)
    validate(spaces, "spaces", check_class="logical", check_length=1)

    if isinstance(x, str):
        return _escape(x, newlines, spaces)
    return [_escape(text, newlines, spaces) for text in x]
