"""Containers for formatted results and helpers for passing options around."""

from __future__ import annotations

import collections.abc
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Union

import pandas as pd

Report = Union[str, Dict[str, str], None]


@dataclass
class ApaResults:
    """Formatted results of a statistical analysis.

    Attributes:
        estimate: Effect size or parameter estimates with confidence
            intervals; one string, or a dict keyed by sanitized term name.
        statistic: Test statistics, degrees of freedom and p values; same
            shape as ``estimate``.
        full_result: ``estimate`` and ``statistic`` combined per term.
        table: All results as a table, e.g. for a manuscript table.
    """

    estimate: Report = None
    statistic: Report = None
    full_result: Report = None
    table: Optional[pd.DataFrame] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def apa_print_container() -> ApaResults:
    """Return an empty results container."""
    return ApaResults()


def select_parameter(values: Any, i: int) -> Any:
    """Return the ``i``-th parameter value, recycling short sequences.

    Useful when an option may be given once for all terms or once per term:
    ``select_parameter([2, 3], 4)`` is ``2``. Scalars and strings are returned
    unchanged. Positions are used for :class:`pandas.Series`, never labels.

    Raises:
        TypeError: If ``values`` is a mapping.
        IndexError: If ``values`` is empty.
    """
    if isinstance(values, collections.abc.Mapping):
        raise TypeError("Parameter values must be a sequence, not a mapping.")
    if isinstance(values, (str, bytes)) or not hasattr(values, "__getitem__"):
        return values
    if len(values) == 0:
        raise IndexError("Cannot select a parameter from an empty sequence.")
    if isinstance(values, pd.Series):
        return values.iloc[i % len(values)]
    return values[i % len(values)]


def set_defaults(
    options: Optional[Mapping[str, Any]],
    set_values: Optional[Mapping[str, Any]] = None,
    set_if_none: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Merge option dictionaries.

    Args:
        options: Options as passed by the caller, usually ``**kwargs``.
        set_values: Entries that always override ``options``.
        set_if_none: Entries used only where ``options`` has no value (the key
            is absent or set to None).

    Returns:
        dict: A new dictionary; ``options`` is not modified.
    """
    merged = dict(options or {})
    merged.update(set_values or {})
    for key, value in (set_if_none or {}).items():
        if merged.get(key) is None:
            merged[key] = value
    return merged
