"""Clean model term names for lookup and for display.

Term names come straight from model output, e.g. ``"(Intercept)"``,
``"Factor A:Factor B"`` or ``"scale(age)"``. :func:`sanitize_terms` turns them
into identifiers that are safe to use as dictionary keys or attribute names;
:func:`prettify_terms` turns them into labels for tables, with interaction
terms joined by a cross.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Union

import numpy as np
import pandas as pd

from .validation import validate

Terms = Union[str, Sequence[str]]

INTERACTION_SYMBOL = " × "
LATEX_INTERACTION_SYMBOL = " $\\times$ "

_PARENTHESES = re.compile(r"\(|\)")
_NON_WORD = re.compile(r"\W")
_DECORATIONS = re.compile(r"\(|\)|`|.+\$")
# df$var, df[["var"]] and df[, "var"] style member access
_MEMBER_ACCESS = re.compile(r'.+\$|.+\[\["|"\]\]|.+\[.*,\s*"|"\s*\]')
_SEPARATORS = re.compile(r"_|\.")
_INTERACTION_COUNT = re.compile(r"×|\\times")


def _apply(x: Terms, func) -> Union[str, List[str]]:
    if isinstance(x, str):
        return func(x)
    return [func(term) for term in x]


def sanitize_terms(x: Terms, standardized: bool = False) -> Union[str, List[str]]:
    """Make term names safe for programmatic lookup.

    Args:
        x: Term name or sequence of term names.
        standardized (bool, optional): Replace the ``scale(`` wrapper of
            standardized predictors by ``z_``. Defaults to ``False``.

    Returns:
        Sanitized name(s): parentheses removed, every non-word character
        replaced by ``_``.

    Example:
        >>> sanitize_terms(["(Intercept)", "Factor A:Factor B", "scale(age)"], standardized=True)
        ['Intercept', 'Factor_A_Factor_B', 'z_age']
    """
    validate(x, "x", check_class="character")

    def clean(term: str) -> str:
        if standardized:
            term = term.replace("scale(", "z_")
        term = _PARENTHESES.sub("", term)
        return _NON_WORD.sub("_", term)

    return _apply(x, clean)


def prettify_terms(
    x: Terms, standardized: bool = False, latex: bool = False
) -> Union[str, List[str]]:
    """Make term names readable for tables.

    Args:
        x: Term name or sequence of term names.
        standardized (bool, optional): Drop the ``scale(`` wrapper of
            standardized predictors. Defaults to ``False``.
        latex (bool, optional): Join interaction terms with ``$\\times$``
            instead of the plain cross. Defaults to ``False``.

    Returns:
        Prettified name(s).

    Example:
        >>> prettify_terms("Factor A:Factor B")
        'Factor A × Factor B'
    """
    validate(x, "x", check_class="character")
    cross = LATEX_INTERACTION_SYMBOL if latex else INTERACTION_SYMBOL

    def pretty(term: str) -> str:
        if standardized:
            term = term.replace("scale(", "")
        term = _DECORATIONS.sub("", term)
        term = _MEMBER_ACCESS.sub("", term)
        term = _SEPARATORS.sub(" ", term)
        parts = [part for part in term.split(":") if part]
        return cross.join(part[:1].upper() + part[1:] for part in parts)

    return _apply(x, pretty)


def sort_effects(x: pd.DataFrame) -> pd.DataFrame:
    """Sort a results table by effect complexity.

    Main effects come first, then two-way interactions, three-way
    interactions and so on. Rows of equal complexity keep their order.

    Args:
        x (pandas.DataFrame): Table with an ``Effect`` column holding
            prettified term names.

    Returns:
        pandas.DataFrame: The same rows, reordered.
    """
    validate(x, "x", check_class="data.frame", check_cols="Effect")
    depth = x["Effect"].astype(str).str.count(_INTERACTION_COUNT.pattern)
    return x.iloc[np.argsort(depth.to_numpy(), kind="stable")]
