"""Tests for confidence interval formatting."""

import numpy as np
import pandas as pd
import pytest

from apatext.confint import ConfidenceInterval, print_confint
from apatext.validation import ValidationError


def test_pair_with_confidence_level():
    assert print_confint([1, 2], conf_level=0.95) == "95% CI [1.00, 2.00]"
    assert print_confint((1, 2), conf_level=95) == "95% CI [1.00, 2.00]"
    assert print_confint(np.array([1.0, 2.0]), conf_level=0.9) == "90% CI [1.00, 2.00]"


def test_pair_without_confidence_level():
    assert print_confint([1, 2]) == "[1.00, 2.00]"


def test_attached_confidence_level():
    assert print_confint(ConfidenceInterval(1, 2, 0.9)) == "90% CI [1.00, 2.00]"

    bounds = pd.Series([1.0, 2.0])
    bounds.attrs["conf_level"] = 0.99
    assert print_confint(bounds) == "99% CI [1.00, 2.00]"


def test_explicit_level_wins_over_attached_level():
    ci = ConfidenceInterval(1, 2, 0.9)
    assert print_confint(ci, conf_level=0.95) == "95% CI [1.00, 2.00]"


def test_formatter_options_are_passed_on():
    assert print_confint([1, 2], digits=1) == "[1.0, 2.0]"
    assert print_confint([0.1, 0.2], gt1=False) == "[.10, .20]"


def test_custom_formatter():
    def one_decimal(values):
        return [f"{v:.1f}" for v in values]

    assert print_confint([1, 2], formatter=one_decimal) == "[1.0, 2.0]"


def test_latex_output():
    assert print_confint([1, 2], conf_level=0.95, latex=True) == "95\\% CI $[1.00$, $2.00]$"


def test_infinite_bounds_are_allowed():
    assert print_confint([1, np.inf], conf_level=95) == "95% CI [1.00, ∞]"


def test_invalid_pairs():
    with pytest.raises(ValidationError, match="'x' must be of length 2"):
        print_confint([1, 2, 3])
    with pytest.raises(ValidationError, match="'x' is NA"):
        print_confint([1, np.nan])
    with pytest.raises(ValidationError, match="'x' must be of class 'numeric'"):
        print_confint(["a", "b"])


def test_invalid_confidence_level():
    with pytest.raises(ValidationError, match="'conf_level' must be between 0 and 100"):
        print_confint([1, 2], conf_level=150)
    with pytest.raises(ValidationError, match="'conf_level' must be of length 1"):
        print_confint([1, 2], conf_level=[0.9, 0.95])


def test_table_gives_one_interval_per_term():
    table = pd.DataFrame(
        {"2.5 %": [0.1, -0.5], "97.5 %": [0.9, 0.5]},
        index=["(Intercept)", "Factor A:Factor B"],
    )
    assert print_confint(table) == {
        "Intercept": "95% CI [0.10, 0.90]",
        "Factor_A_Factor_B": "95% CI [-0.50, 0.50]",
    }


def test_single_row_table_gives_bare_string():
    table = pd.DataFrame({"2.5 %": [0.1], "97.5 %": [0.9]}, index=["A"])
    assert print_confint(table) == "95% CI [0.10, 0.90]"


def test_table_level_from_argument_and_attrs():
    table = pd.DataFrame({"lower": [0.1, 0.2], "upper": [0.9, 1.0]}, index=["A", "B"])
    assert print_confint(table) == {"A": "[0.10, 0.90]", "B": "[0.20, 1.00]"}
    assert print_confint(table, conf_level=0.9)["A"] == "90% CI [0.10, 0.90]"

    table.attrs["conf_level"] = 99
    assert print_confint(table)["B"] == "99% CI [0.20, 1.00]"


def test_unlabelled_rows_are_numbered():
    out = print_confint(np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert out == {1: "[1.00, 2.00]", 2: "[3.00, 4.00]"}

    out = print_confint(pd.DataFrame([[1.0, 2.0], [3.0, 4.0]]), conf_level=0.95)
    assert out == {1: "95% CI [1.00, 2.00]", 2: "95% CI [3.00, 4.00]"}


def test_asymmetric_column_labels_warn():
    table = pd.DataFrame({"5 %": [0.1, 0.2], "97.5 %": [0.9, 1.0]}, index=["A", "B"])
    with pytest.warns(UserWarning, match="symmetric"):
        out = print_confint(table)
    assert out["A"] == "90% CI [0.10, 0.90]"


def test_latex_table_collapses_nested_infinity():
    table = pd.DataFrame(
        {"2.5 %": [-np.inf, 0.1], "97.5 %": [1.0, np.inf]}, index=["a", "b"]
    )
    out = print_confint(table, latex=True)
    assert out["a"] == "95\\% CI $[-\\infty$, $1.00]$"
    assert out["b"] == "95\\% CI $[0.10$, $\\infty]$"


def test_invalid_tables():
    with pytest.raises(ValidationError, match="'x' must be of length 2"):
        print_confint(pd.DataFrame({"a": [1.0], "b": [2.0], "c": [3.0]}))
    with pytest.raises(ValidationError, match="must be of class 'numeric'"):
        print_confint(pd.DataFrame({"a": ["x"], "b": [2.0]}))
