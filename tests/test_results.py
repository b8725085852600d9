"""Tests for the result container, option helpers and localization."""

import pandas as pd
import pytest

from apatext.localization import localize, package_available
from apatext.results import ApaResults, apa_print_container, select_parameter, set_defaults


def test_empty_container():
    results = apa_print_container()
    assert isinstance(results, ApaResults)
    assert results.to_dict() == {
        "estimate": None,
        "statistic": None,
        "full_result": None,
        "table": None,
    }


def test_select_parameter_recycles():
    assert select_parameter([2, 3], 0) == 2
    assert select_parameter([2, 3], 1) == 3
    assert select_parameter([2, 3], 4) == 2
    assert select_parameter(2, 5) == 2
    assert select_parameter("abc", 1) == "abc"
    with pytest.raises(IndexError):
        select_parameter([], 0)


def test_select_parameter_uses_positions():
    digits = pd.Series([2, 3], index=[1, 0])
    assert select_parameter(digits, 0) == 2
    assert select_parameter(digits, 3) == 3
    with pytest.raises(TypeError, match="not a mapping"):
        select_parameter({"a": 2}, 0)


def test_set_defaults():
    options = {"digits": 2, "na_string": None}
    merged = set_defaults(
        options,
        set_values={"gt1": False},
        set_if_none={"digits": 3, "na_string": "-", "zero": False},
    )
    assert merged == {"digits": 2, "na_string": "-", "gt1": False, "zero": False}
    assert options == {"digits": 2, "na_string": None}
    assert set_defaults(None, set_values={"digits": 1}) == {"digits": 1}


def test_set_values_override():
    assert set_defaults({"digits": 2}, set_values={"digits": 4}) == {"digits": 4}


def test_localize():
    assert localize()["table"] == "Table"
    assert localize("german")["table"] == "Tabelle"
    assert localize("German")["keywords"] == "Schlüsselwörter"
    assert localize("klingon") == localize("english")


def test_localize_returns_copy():
    phrases = localize()
    phrases["table"] = "Tab."
    assert localize()["table"] == "Table"


def test_package_available():
    assert package_available("pandas")
    assert not package_available("surely_not_an_installed_package")
    assert not package_available("surely_not_an_installed_package.sub")
