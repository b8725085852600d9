"""Tests for term sanitizing, prettifying and sorting."""

import pandas as pd
import pytest

from apatext.terms import prettify_terms, sanitize_terms, sort_effects
from apatext.validation import ValidationError

TERMS = ["(Intercept)", "Factor A", "Factor B", "Factor A:Factor B", "scale(FactorA)"]


def test_sanitize_terms():
    assert sanitize_terms("(Intercept)") == "Intercept"
    assert sanitize_terms("Factor A:Factor B") == "Factor_A_Factor_B"
    assert sanitize_terms(TERMS) == [
        "Intercept",
        "Factor_A",
        "Factor_B",
        "Factor_A_Factor_B",
        "scaleFactorA",
    ]


def test_sanitize_standardized_terms():
    assert sanitize_terms("scale(FactorA)", standardized=True) == "z_FactorA"


def test_sanitize_is_idempotent():
    once = sanitize_terms(TERMS)
    assert sanitize_terms(once) == once


def test_prettify_terms():
    assert prettify_terms("Factor A:Factor B") == "Factor A × Factor B"
    assert prettify_terms("(Intercept)") == "Intercept"
    assert prettify_terms("factor_a:factor.b") == "Factor a × Factor b"
    assert prettify_terms("`my var`") == "My var"
    assert prettify_terms("a:") == "A"


def test_prettify_removes_member_access():
    assert prettify_terms("df$age") == "Age"
    assert prettify_terms('data[["age"]]') == "Age"
    assert prettify_terms('data[, "age"]') == "Age"


def test_prettify_standardized_and_latex():
    assert prettify_terms("scale(age)", standardized=True) == "Age"
    assert prettify_terms("a:b", latex=True) == "A $\\times$ B"
    assert prettify_terms(["a", "a:b"]) == ["A", "A × B"]


def test_sort_effects_orders_by_interaction_depth():
    table = pd.DataFrame(
        {
            "Effect": ["A × B", "A", "A × B × C", "B", "A $\\times$ C"],
            "F": [1.0, 2.0, 3.0, 4.0, 5.0],
        }
    )
    out = sort_effects(table)
    assert list(out["Effect"]) == ["A", "B", "A × B", "A $\\times$ C", "A × B × C"]
    assert list(out["F"]) == [2.0, 4.0, 1.0, 5.0, 3.0]


def test_sort_effects_requires_effect_column():
    with pytest.raises(ValidationError, match="Variable 'Effect' is not present"):
        sort_effects(pd.DataFrame({"Term": ["A"]}))
    with pytest.raises(ValidationError, match="must be of class 'data.frame'"):
        sort_effects({"Effect": ["A"]})
