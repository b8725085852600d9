"""Convert names of statistics to their APA symbols."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Union

from .validation import validate

# Exact-match lookup, applied after the "-squared" rewrite.
STAT_NAME_SYMBOLS: Dict[str, str] = {
    "cor": "r",
    "rho": "r_{\\mathrm{s}}",
    "tau": "\\uptau",
    "mean of x": "M",
    "(pseudo)median": "Mdn^*",
    "mean of the differences": "M_d",
    "difference in location": "Mdn_d",
    "Bartlett's K^2": "K^2",
}

PAIRED_MEAN_SYMBOL = "\\Delta M"

_SQUARED = re.compile(r"-squared", re.IGNORECASE)
_PROPORTION = re.compile(r"prop \d")
_CHI = re.compile(r"x|chi", re.IGNORECASE)


def _symbol(name: str) -> str:
    return _CHI.sub(r"\\chi", STAT_NAME_SYMBOLS.get(name, name))


def convert_stat_name(
    x: Union[str, Sequence[str]]
) -> Union[str, List[str], None]:
    """Convert the name of a statistic to the symbol required by APA guidelines.

    Names as produced by generic test routines (``"t"``, ``"X-squared"``,
    ``"mean of the differences"``) are rewritten in this order:

    1. ``-squared`` (any case) becomes ``^2``.
    2. Two names of which one mentions ``mean`` (a pair of group means)
       become ``\\Delta M``.
    3. Names that all read ``prop <digit>`` (proportion labels) yield None.
    4. Known names are looked up in :data:`STAT_NAME_SYMBOLS`.
    5. Every ``x`` or ``chi`` (any case) becomes ``\\chi``. This also applies
       to symbols produced by the lookup.

    Args:
        x: Name of the statistic, or a list of names.

    Returns:
        The symbol as a string (a list of symbols when several names are
        given and rule 2 does not apply), or None for proportion labels.

    Raises:
        ValidationError: If ``x`` is not a string or list of strings.

    Example:
        >>> convert_stat_name("X-squared")
        '\\\\chi^2'
    """
    validate(x, "x", check_class="character")

    names = [x] if isinstance(x, str) else list(x)
    names = [_SQUARED.sub("^2", name) for name in names]

    if len(names) == 2 and any("mean" in name for name in names):
        names = [PAIRED_MEAN_SYMBOL]

    if all(_PROPORTION.search(name) for name in names):
        return None

    symbols = [_symbol(name) for name in names]
    if len(symbols) == 1:
        return symbols[0]
    return symbols
