"""Validate arguments passed to the formatting helpers.

Every formatting routine in the package checks its inputs with
:func:`validate` before doing any work. A check request is an additive AND of
independent, optional constraints (see :class:`ValidationSpec`); constraints
are evaluated in a fixed order so that the first violation found is the one
reported.

The value "classes" understood by the validator form a closed set of tagged
variants:

- ``numeric`` (alias ``number``): real numbers, excluding booleans
- ``integer``: integer-typed numbers
- ``character`` (alias ``text``): strings
- ``logical`` (alias ``boolean``): booleans
- ``function`` (alias ``callable``): callables
- ``data.frame`` (alias ``tabular``): :class:`pandas.DataFrame`
- ``matrix``: two-dimensional :class:`numpy.ndarray`
- ``list``: lists, tuples and mappings
"""

from __future__ import annotations

import inspect
import linecache
import logging
import numbers
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

Names = Union[str, Sequence[str], None]

_CALL_PATTERN = re.compile(r"\bvalidate\((.*)", re.DOTALL)


class ValidationError(ValueError):
    """Raised when a value violates a validation constraint.

    Attributes:
        name: Label of the offending parameter.
        constraint: Short tag of the violated constraint (``"none"``,
            ``"dim"``, ``"length"``, ``"na"``, ``"finite"``, ``"integer"``,
            ``"class"``, ``"mode"``, ``"cols"``, ``"range"`` or ``"duplicate"``).
    """

    def __init__(self, message: str, name: str, constraint: str):
        super().__init__(message)
        self.name = name
        self.constraint = constraint


def _flatten(values: Iterable[Any]) -> list:
    out = []
    for value in values:
        if isinstance(value, (list, tuple, set, frozenset, np.ndarray, pd.Series)):
            out.extend(_elements(value))
        else:
            out.append(value)
    return out


def _elements(x: Any) -> list:
    """Return the scalar elements of ``x`` as a flat list."""
    if isinstance(x, pd.DataFrame):
        return list(x.to_numpy(dtype=object).ravel())
    if isinstance(x, (np.ndarray, pd.Series, pd.Index)):
        return list(np.asarray(x, dtype=object).ravel())
    if isinstance(x, Mapping):
        return _flatten(x.values())
    if isinstance(x, (list, tuple, set, frozenset)):
        return _flatten(x)
    return [x]


def _is_na(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _present(x: Any) -> list:
    # NaN counts as a (missing) number; None and pd.NA carry no type.
    return [v for v in _elements(x) if v is not None and v is not pd.NA]


def _has_dtype(x: Any) -> bool:
    return isinstance(x, (np.ndarray, pd.Series, pd.Index)) and x.dtype != object


def is_numeric(x: Any) -> bool:
    """Return True when every element of ``x`` is a real, non-boolean number."""
    if isinstance(x, pd.DataFrame):
        return x.shape[1] > 0 and all(
            pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)
            for dtype in x.dtypes
        )
    if _has_dtype(x):
        return pd.api.types.is_numeric_dtype(x.dtype) and not pd.api.types.is_bool_dtype(
            x.dtype
        )
    if isinstance(x, Mapping):
        return False
    values = _present(x)
    return bool(values) and all(_is_number(v) for v in values)


def _is_integer(x: Any) -> bool:
    if _has_dtype(x):
        return pd.api.types.is_integer_dtype(x.dtype)
    if isinstance(x, (pd.DataFrame, Mapping)):
        return False
    values = _present(x)
    return bool(values) and all(
        isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_))
        for v in values
    )


def _is_character(x: Any) -> bool:
    if isinstance(x, (pd.DataFrame, Mapping)):
        return False
    values = _present(x)
    return bool(values) and all(isinstance(v, str) for v in values)


def _is_logical(x: Any) -> bool:
    if _has_dtype(x):
        return pd.api.types.is_bool_dtype(x.dtype)
    if isinstance(x, (pd.DataFrame, Mapping)):
        return False
    values = _present(x)
    return bool(values) and all(isinstance(v, (bool, np.bool_)) for v in values)


def _is_list(x: Any) -> bool:
    return isinstance(x, (list, tuple, Mapping))


_CLASS_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "numeric": is_numeric,
    "integer": _is_integer,
    "character": _is_character,
    "logical": _is_logical,
    "function": callable,
    "data.frame": lambda x: isinstance(x, pd.DataFrame),
    "matrix": lambda x: isinstance(x, np.ndarray) and x.ndim == 2,
    "list": _is_list,
}

_CLASS_ALIASES: Dict[str, str] = {
    "number": "numeric",
    "text": "character",
    "boolean": "logical",
    "callable": "function",
    "tabular": "data.frame",
}

_MODE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "numeric": is_numeric,
    "character": _is_character,
    "logical": _is_logical,
    "function": callable,
    "list": lambda x: _is_list(x) or isinstance(x, pd.DataFrame),
}


def _as_names(value: Names) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _canonical_class(name: str) -> str:
    canonical = _CLASS_ALIASES.get(name, name)
    if canonical not in _CLASS_CHECKS:
        raise ValueError(
            f"Unknown class '{name}'; expected one of {sorted(_CLASS_CHECKS)}."
        )
    return canonical


def value_length(x: Any) -> int:
    """Length of ``x``: 1 for scalars, element count for arrays, column count for data frames."""
    if isinstance(x, pd.DataFrame):
        return int(x.shape[1])
    if isinstance(x, np.ndarray):
        return int(x.size)
    if isinstance(x, (str, bytes)) or not hasattr(x, "__len__"):
        return 1
    return len(x)


def _format_bound(value: Any) -> str:
    if _is_number(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ValidationSpec:
    """Constraints a value must satisfy.

    All constraints are optional; a constraint left at its default is not
    checked (``check_na`` and ``check_infinite`` are on by default).

    Attributes:
        check_class: Class name(s) the value must belong to (all must hold).
        check_mode: Mode name(s) the value must have.
        check_integer: Require whole numbers for numeric input.
        check_na: Reject NA elements. When False, a value containing NA
            elements passes without further checks.
        check_infinite: Reject infinite elements in numeric input.
        check_length: Expected length (see :func:`value_length`).
        check_dim: Expected shape of arrays and data frames.
        check_range: Inclusive ``(lower, upper)`` bounds for every element.
        check_cols: Column names that must be present in tabular input.
    """

    check_class: Names = None
    check_mode: Names = None
    check_integer: bool = False
    check_na: bool = True
    check_infinite: bool = True
    check_length: Optional[int] = None
    check_dim: Optional[Sequence[int]] = None
    check_range: Optional[Sequence[float]] = None
    check_cols: Names = None

    def __post_init__(self):
        for cls in _as_names(self.check_class):
            _canonical_class(cls)
        for mode in _as_names(self.check_mode):
            if mode not in _MODE_CHECKS:
                raise ValueError(
                    f"Unknown mode '{mode}'; expected one of {sorted(_MODE_CHECKS)}."
                )
        if self.check_range is not None and len(self.check_range) != 2:
            raise ValueError("check_range must hold exactly two bounds.")

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(_canonical_class(cls) for cls in _as_names(self.check_class))

    def _fail(self, name: str, constraint: str, message: str):
        logger.debug("Validation of '%s' failed (%s): %s", name, constraint, message)
        raise ValidationError(message, name=name, constraint=constraint)

    def check(self, x: Any, name: str = "x") -> bool:
        """Check ``x`` against every constraint and return True.

        Args:
            x: Value to validate.
            name: Label used in error messages.

        Returns:
            bool: True when all applicable constraints hold.

        Raises:
            ValidationError: On the first violated constraint.
        """
        if x is None:
            self._fail(name, "none", f"The parameter '{name}' is None.")

        if self.check_dim is not None:
            shape = getattr(x, "shape", None)
            if shape is not None and tuple(shape) != tuple(self.check_dim):
                dims = "x".join(str(d) for d in self.check_dim)
                self._fail(
                    name, "dim", f"The parameter '{name}' must have dimensions {dims}."
                )

        if self.check_length is not None and value_length(x) != self.check_length:
            self._fail(
                name,
                "length",
                f"The parameter '{name}' must be of length {self.check_length}.",
            )

        classes = self.classes
        if "function" not in classes and any(_is_na(v) for v in _elements(x)):
            if self.check_na:
                self._fail(name, "na", f"The parameter '{name}' is NA.")
            return True

        numeric = is_numeric(x)
        if numeric and (self.check_infinite or self.check_integer):
            values = np.asarray([float(v) for v in _elements(x)], dtype=float)
            if self.check_infinite and bool(np.isinf(values).any()):
                self._fail(name, "finite", f"The parameter '{name}' must be finite.")
            finite = values[np.isfinite(values)]
            if self.check_integer and bool((np.mod(finite, 1) != 0).any()):
                self._fail(
                    name, "integer", f"The parameter '{name}' must be an integer."
                )

        for cls in _as_names(self.check_class):
            if not _CLASS_CHECKS[_canonical_class(cls)](x):
                self._fail(
                    name, "class", f"The parameter '{name}' must be of class '{cls}'."
                )

        for mode in _as_names(self.check_mode):
            if not _MODE_CHECKS[mode](x):
                self._fail(
                    name, "mode", f"The parameter '{name}' must be of mode '{mode}'."
                )

        required = _as_names(self.check_cols)
        if required:
            if isinstance(x, Mapping):
                available = set(x.keys())
            else:
                available = set(getattr(x, "columns", ()))
            missing = [col for col in required if col not in available]
            if missing:
                self._fail(
                    name,
                    "cols",
                    f"Variable '{missing[0]}' is not present in your data frame.",
                )

        if self.check_range is not None:
            lower, upper = self.check_range
            values = pd.to_numeric(pd.Series(_elements(x), dtype=object), errors="coerce")
            inside = (values >= lower) & (values <= upper)
            if not bool(inside.all()):
                self._fail(
                    name,
                    "range",
                    f"The parameter '{name}' must be between "
                    f"{_format_bound(lower)} and {_format_bound(upper)}.",
                )

        return True


def _call_site_label(frame, default: str = "x") -> str:
    """Recover the expression passed as first argument to ``validate``."""
    try:
        filename, lineno = frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame

    # Multi-line calls may report any line of the call expression.
    following = "".join(linecache.getline(filename, n) for n in range(lineno, lineno + 5))
    matches = list(_CALL_PATTERN.finditer(following))
    if not matches:
        window = "".join(
            linecache.getline(filename, n) for n in range(max(1, lineno - 4), lineno + 5)
        )
        matches = list(_CALL_PATTERN.finditer(window))
        if not matches:
            return default
        match = matches[-1]
    else:
        match = matches[0]

    depth = 0
    label = []
    for char in match.group(1):
        if char in "([{":
            depth += 1
        elif char in ")]}":
            if depth == 0:
                break
            depth -= 1
        elif char == "," and depth == 0:
            break
        label.append(char)
    return " ".join("".join(label).split()) or default


def validate(
    x: Any,
    name: Optional[str] = None,
    check_class: Names = None,
    check_mode: Names = None,
    check_integer: bool = False,
    check_na: bool = True,
    check_infinite: bool = True,
    check_length: Optional[int] = None,
    check_dim: Optional[Sequence[int]] = None,
    check_range: Optional[Sequence[float]] = None,
    check_cols: Names = None,
) -> bool:
    """Validate a function argument.

    Args:
        x: Value to validate.
        name: Parameter name used in error messages. When omitted, the
            expression text at the call site is used, falling back to ``"x"``
            when the caller's source is unavailable.
        check_class: Class name(s) to expect, e.g. ``"numeric"``.
        check_mode: Mode name(s) to expect.
        check_integer: Expect whole numbers.
        check_na: Expect no NA elements.
        check_infinite: Expect finite numbers.
        check_length: Expected length.
        check_dim: Expected shape.
        check_range: Inclusive ``(lower, upper)`` bounds.
        check_cols: Columns expected in a data frame.

    Returns:
        bool: True when all constraints hold.

    Raises:
        ValidationError: If a constraint is violated.
        ValueError: If an unknown class or mode name is requested.

    Example:
        >>> in_paren = True
        >>> validate(in_paren, check_class="logical", check_length=1)
        True
    """
    if name is None:
        name = _call_site_label(inspect.currentframe().f_back)

    spec = ValidationSpec(
        check_class=check_class,
        check_mode=check_mode,
        check_integer=check_integer,
        check_na=check_na,
        check_infinite=check_infinite,
        check_length=check_length,
        check_dim=check_dim,
        check_range=check_range,
        check_cols=check_cols,
    )
    return spec.check(x, name=name)
