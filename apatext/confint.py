"""Format confidence intervals for APA-style reporting.

A confidence interval is given either as a pair of bounds, or as a table with
one row per model term and two columns holding the lower and upper bounds.
Tables as returned by typical model summaries label their bound columns with
percentiles (``"2.5 %"``, ``"97.5 %"``); the confidence level is derived from
these labels when it is not given otherwise.
"""

from __future__ import annotations

import logging
import math
import re
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np
import pandas as pd

from .number_format import printnum
from .results import set_defaults
from .terms import sanitize_terms
from .validation import validate

logger = logging.getLogger(__name__)

Interval = Union[str, Dict[Union[str, int], str]]

_NOT_PERCENTILE = re.compile(r"[^.\d]")

LATEX_INFINITY = "$\\infty$"


@dataclass(frozen=True)
class ConfidenceInterval:
    """Lower and upper bound of a confidence interval.

    Attributes:
        lower: Lower bound.
        upper: Upper bound.
        conf_level: Confidence level, as a fraction (``0.95``) or a
            percentage (``95``). Optional.
    """

    lower: float
    upper: float
    conf_level: Optional[float] = None

    def bounds(self) -> List[float]:
        return [self.lower, self.upper]


def _attached_level(x: Any) -> Optional[float]:
    if isinstance(x, ConfidenceInterval):
        return x.conf_level
    attrs = getattr(x, "attrs", None)
    if isinstance(attrs, Mapping):
        return attrs.get("conf_level")
    return None


def _level_from_labels(labels: List[str]) -> Optional[float]:
    """Derive the confidence level from percentile column labels."""
    percentiles = []
    for label in labels:
        try:
            percentiles.append(float(_NOT_PERCENTILE.sub("", label)))
        except ValueError:
            percentiles.append(math.nan)

    lower = percentiles[0]
    if math.isnan(lower):
        return None
    if len(percentiles) > 1 and not math.isclose(percentiles[1], 100 - lower):
        warnings.warn(
            f"Column labels {labels} do not describe symmetric bounds; "
            f"the confidence level is derived from '{labels[0]}' only.",
            UserWarning,
            stacklevel=3,
        )
    return 100 - 2 * lower


def _format_level(level: float) -> str:
    return format(float(level), ".15g")


def _is_unlabelled(index: pd.Index) -> bool:
    return (
        isinstance(index, pd.RangeIndex) and index.start == 0 and index.step == 1
    )


def print_confint(
    x: Any,
    conf_level: Optional[float] = None,
    latex: bool = False,
    formatter: Callable[..., Any] = printnum,
    **kwargs,
) -> Interval:
    """Create a confidence interval string.

    Args:
        x: Either the two bounds of one interval (a
            :class:`ConfidenceInterval`, a list/tuple, a 1-D array or a
            :class:`pandas.Series`), or a table of intervals (a
            :class:`pandas.DataFrame` or 2-D array with two columns) with
            term names as row labels. pandas input may carry its confidence
            level in ``attrs["conf_level"]``.
        conf_level (float, optional): Confidence level as a fraction or a
            percentage. Takes precedence over a level attached to ``x`` and
            over column labels. When no level can be determined, the level
            is left out of the output.
        latex (bool, optional): Produce LaTeX (``95\\% CI $[1.00$, $2.00]$``)
            instead of plain text (``95% CI [1.00, 2.00]``). Defaults to
            ``False``.
        formatter (callable, optional): Number formatter, called once with all
            bounds. Defaults to :func:`~apatext.number_format.printnum`.
        **kwargs: Passed on to ``formatter``.

    Returns:
        The formatted interval for a pair of bounds or a one-row table;
        otherwise a dict mapping sanitized term names (or 1-based row numbers
        for unlabelled rows) to formatted intervals.

    Raises:
        ValidationError: If bounds are missing or not numeric, if a pair does
            not hold exactly two bounds, or if the confidence level is not a
            single number between 0 and 100.

    Example:
        >>> print_confint([1, 2], conf_level=0.95)
        '95% CI [1.00, 2.00]'
    """
    tabular = isinstance(x, pd.DataFrame) or (isinstance(x, np.ndarray) and x.ndim == 2)
    attached = _attached_level(x)
    if isinstance(x, ConfidenceInterval):
        x = x.bounds()

    if tabular:
        table = x if isinstance(x, pd.DataFrame) else pd.DataFrame(x)
        for column in range(table.shape[1]):
            validate(
                table.iloc[:, column], "x", check_class="numeric", check_infinite=False
            )
        validate(table, "x", check_length=2)
    else:
        for value in np.ravel(np.asarray(x, dtype=object)):
            validate(value, "x", check_class="numeric", check_infinite=False)

    if latex and formatter is printnum:
        kwargs = set_defaults(kwargs, set_if_none={"inf_string": LATEX_INFINITY})
    ci = formatter(table if tabular else x, **kwargs)

    if conf_level is None:
        conf_level = attached
    if (
        conf_level is None
        and isinstance(x, pd.DataFrame)
        and all(isinstance(label, str) for label in x.columns)
    ):
        conf_level = _level_from_labels(list(x.columns))

    prefix = ""
    if conf_level is not None:
        validate(
            conf_level,
            "conf_level",
            check_class="numeric",
            check_length=1,
            check_range=(0, 100),
        )
        if conf_level < 1:
            conf_level = conf_level * 100
        logger.debug("Reporting %s%% confidence intervals", _format_level(conf_level))
        percent = "\\%" if latex else "%"
        prefix = f"{_format_level(conf_level)}{percent} CI "

    def interval(lower: str, upper: str) -> str:
        if latex:
            return f"{prefix}$[{lower}$, ${upper}]$"
        return f"{prefix}[{lower}, {upper}]"

    if not tabular:
        bounds = list(np.ravel(np.asarray(ci, dtype=object)))
        validate(bounds, "x", check_length=2)
        return interval(*bounds)

    cells = np.asarray(ci, dtype=object).reshape(table.shape)
    if isinstance(x, pd.DataFrame) and not _is_unlabelled(x.index):
        terms = sanitize_terms([str(label) for label in x.index])
    else:
        terms = list(range(1, table.shape[0] + 1))

    apa_ci: Dict[Union[str, int], str] = {}
    for term, (lower, upper) in zip(terms, cells):
        # The formatter wraps infinity in math delimiters inside an open math span.
        apa_ci[term] = interval(lower, upper).replace(LATEX_INFINITY, "\\infty", 1)

    if len(apa_ci) == 1:
        return next(iter(apa_ci.values()))
    return apa_ci
