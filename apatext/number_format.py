"""Format numbers for reporting in manuscript text and tables.

This is the number formatter used by the confidence-interval helpers. Values
are rounded to a fixed number of decimals and padded with trailing zeros so
that all numbers of a table column line up.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict

import numpy as np
import pandas as pd

from .validation import _elements, _is_na, validate

NUMBER_FORMAT_DEFAULTS: Dict[str, Any] = {
    "digits": 2,
    "gt1": True,
    "zero": True,
    "na_string": "NA",
    "big_mark": ",",
    "inf_string": "∞",
    "add_equals": False,
}


def _format_scalar(
    value: Any,
    digits: int,
    gt1: bool,
    zero: bool,
    na_string: str,
    big_mark: str,
    inf_string: str,
    add_equals: bool,
) -> str:
    if _is_na(value):
        return na_string

    v = float(value)
    if math.isinf(v):
        text = inf_string if v > 0 else f"-{inf_string}"
    else:
        rounded = round(v, digits)
        if rounded == 0:
            rounded = 0.0  # avoid "-0.00"
        if not zero and rounded == 0:
            text = f"< {10 ** -digits:.{digits}f}"
        else:
            text = f"{rounded:,.{digits}f}".replace(",", big_mark)
        if not gt1:
            text = re.sub(r"(^|[<\s-])0\.", r"\1.", text)

    if add_equals and not text.startswith(("<", ">")):
        text = f"= {text}"
    return text


def printnum(
    x: Any,
    digits: int = 2,
    gt1: bool = True,
    zero: bool = True,
    na_string: str = "NA",
    big_mark: str = ",",
    inf_string: str = "∞",
    add_equals: bool = False,
):
    """Format numbers as reporting-ready strings.

    Args:
        x: A number, a list/tuple of numbers, a :class:`numpy.ndarray`, a
            :class:`pandas.Series` or a :class:`pandas.DataFrame`.
        digits (int, optional): Decimal places. Defaults to ``2``.
        gt1 (bool, optional): Whether values may exceed 1 in magnitude. When
            False, values outside ``[-1, 1]`` are rejected and the leading zero
            is dropped (``0.25`` becomes ``.25``). Defaults to ``True``.
        zero (bool, optional): Whether values that round to zero are shown as
            zero. When False they are shown as ``< 0.01``. Defaults to ``True``.
        na_string (str, optional): Text for missing values. Defaults to ``"NA"``.
        big_mark (str, optional): Thousands separator. Defaults to ``","``.
        inf_string (str, optional): Text for infinity; negative infinity gets a
            leading minus. Defaults to ``"∞"``.
        add_equals (bool, optional): Prefix ``"= "`` unless the text starts
            with a comparison sign. Defaults to ``False``.

    Returns:
        A string for scalar input, a list for lists and tuples, an object
        array of the same shape for arrays, and a Series/DataFrame with the
        original index and columns for pandas input.

    Raises:
        ValidationError: If options are malformed, if ``x`` holds non-numeric
            values, or if ``gt1`` is False and a value exceeds 1 in magnitude.

    Example:
        >>> printnum(1234.5)
        '1,234.50'
        >>> printnum(0.25, gt1=False)
        '.25'
    """
    validate(
        digits,
        "digits",
        check_class="numeric",
        check_integer=True,
        check_length=1,
        check_range=(0, 15),
    )
    validate(gt1, "gt1", check_class="logical", check_length=1)
    validate(zero, "zero", check_class="logical", check_length=1)
    validate(add_equals, "add_equals", check_class="logical", check_length=1)
    for label, option in (
        ("na_string", na_string),
        ("big_mark", big_mark),
        ("inf_string", inf_string),
    ):
        validate(option, label, check_class="character", check_length=1)

    # Missing values are formatted as na_string; every other element is checked.
    present = [v for v in _elements(x) if not _is_na(v)]
    if present:
        validate(present, "x", check_class="numeric", check_infinite=False)
        if not gt1:
            validate(present, "x", check_infinite=False, check_range=(-1, 1))

    options = dict(
        digits=int(digits),
        gt1=gt1,
        zero=zero,
        na_string=na_string,
        big_mark=big_mark,
        inf_string=inf_string,
        add_equals=add_equals,
    )

    def fmt(value):
        return _format_scalar(value, **options)

    if isinstance(x, pd.DataFrame):
        out = x.astype(object).apply(lambda col: col.map(fmt))
        out.attrs = dict(x.attrs)
        return out
    if isinstance(x, pd.Series):
        out = x.astype(object).map(fmt)
        out.attrs = dict(x.attrs)
        return out
    if isinstance(x, np.ndarray):
        return np.array([fmt(v) for v in x.ravel()], dtype=object).reshape(x.shape)
    if isinstance(x, (list, tuple)):
        return [fmt(v) for v in x]
    return fmt(x)
