"""Build APA-style estimate reports from coefficient tables.

A coefficient table holds one row per model term with the point estimate and
the bounds of its confidence interval, for example::

    term               estimate  conf.low  conf.high
    (Intercept)            2.10      1.50       2.70
    condition              0.40      0.05       0.75
    condition:age          0.12     -0.02       0.26

:func:`build_estimate_report` turns such a table into in-text estimate strings
(``"b = 0.40, 95% CI [0.05, 0.75]"``) and a display table with prettified
term names, main effects first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from .confint import ConfidenceInterval, print_confint
from .number_format import printnum
from .results import ApaResults, apa_print_container, select_parameter, set_defaults
from .stat_names import convert_stat_name
from .terms import prettify_terms, sanitize_terms, sort_effects
from .validation import ValidationError, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportColumns:
    """Column names of the input coefficient table."""

    term: str = "term"
    estimate: str = "estimate"
    lower: str = "conf.low"
    upper: str = "conf.high"

    def required(self) -> List[str]:
        return [self.term, self.estimate, self.lower, self.upper]


def build_estimate_report(
    table: pd.DataFrame,
    stat_name: str = "b",
    conf_level: Optional[float] = None,
    digits: Union[int, Sequence[int]] = 2,
    columns: ReportColumns = ReportColumns(),
    latex: bool = False,
    standardized: bool = False,
    **kwargs,
) -> ApaResults:
    """Format estimates and confidence intervals of a coefficient table.

    Args:
        table (pandas.DataFrame): One row per term; see :class:`ReportColumns`
            for the expected columns. A confidence level may be attached as
            ``table.attrs["conf_level"]``.
        stat_name (str, optional): Raw name of the estimated statistic,
            converted with :func:`~apatext.stat_names.convert_stat_name`.
            Defaults to ``"b"``.
        conf_level (float, optional): Confidence level of the intervals.
        digits (int or sequence of int, optional): Decimal places, either one
            value for all terms or one per term (recycled). Defaults to ``2``.
        columns (ReportColumns, optional): Column names of ``table``.
        latex (bool, optional): Produce LaTeX markup. Defaults to ``False``.
        standardized (bool, optional): Terms are wrapped in ``scale()``.
        **kwargs: Further options for :func:`~apatext.number_format.printnum`.

    Returns:
        ApaResults: ``estimate`` holds the in-text strings (a dict keyed by
        sanitized term name, or a single string for a one-term table) and
        ``table`` the display table with ``Effect``, ``Estimate`` and ``CI``
        columns. ``statistic`` and ``full_result`` stay empty.

    Raises:
        ValidationError: If required columns are missing or hold missing or
            non-numeric values, or if two terms share a sanitized name.
    """
    validate(table, "table", check_class="data.frame", check_cols=columns.required())
    for col in (columns.estimate, columns.lower, columns.upper):
        validate(table[col], col, check_class="numeric", check_infinite=False)

    if conf_level is None:
        conf_level = table.attrs.get("conf_level")

    symbol = convert_stat_name(stat_name)
    if isinstance(symbol, list):
        symbol = symbol[0]

    terms = table[columns.term].astype(str).tolist()
    keys = sanitize_terms(terms, standardized=standardized)
    effects = prettify_terms(terms, standardized=standardized, latex=latex)

    duplicated = pd.Series(keys, dtype=object)
    duplicated = duplicated[duplicated.duplicated()].tolist()
    if duplicated:
        raise ValidationError(
            f"Term '{duplicated[0]}' occurs more than once in the parameter 'table'.",
            name="table",
            constraint="duplicate",
        )

    results = apa_print_container()
    estimates: Dict[str, str] = {}
    rows: List[Dict[str, Any]] = []
    for i, (key, effect) in enumerate(zip(keys, effects)):
        row = table.iloc[i]
        digits_i = select_parameter(digits, i)
        options = set_defaults(kwargs, set_values={"digits": digits_i})
        bounds = ConfidenceInterval(row[columns.lower], row[columns.upper], conf_level)

        estimate = printnum(row[columns.estimate], **options)
        ci = print_confint(bounds, latex=latex, **options)

        text = estimate if symbol is None else f"{symbol} = {estimate}"
        if latex:
            text = f"${text}$"
        estimates[key] = f"{text}, {ci}"
        rows.append(
            {
                "Effect": effect,
                "Estimate": estimate,
                "CI": print_confint(bounds.bounds(), latex=latex, **options),
            }
        )

    if len(estimates) == 1:
        results.estimate = next(iter(estimates.values()))
    else:
        results.estimate = estimates

    table_out = pd.DataFrame(rows, columns=["Effect", "Estimate", "CI"])
    results.table = sort_effects(table_out).reset_index(drop=True)
    if conf_level is not None:
        results.table.attrs["conf_level"] = conf_level

    logger.info("Formatted %d estimates", len(rows))
    return results
