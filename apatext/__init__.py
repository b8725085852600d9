"""
Helpers for reporting statistical results in APA style.

Formats estimates, confidence intervals and names of statistics as text or
LaTeX for manuscripts, and validates the arguments passed to these helpers.

Modules:
    - validation: Argument validation shared by all formatting helpers.
    - number_format: Rounds and pads numbers for reporting.
    - confint: Formats confidence intervals.
    - stat_names: Converts names of statistics to APA symbols.
    - terms: Sanitizes and prettifies model term names.
    - latex: Escapes text for LaTeX.
    - results: Result container and option helpers.
    - localization: Manuscript phrases in several languages.
    - report: Builds estimate reports from coefficient tables.
"""

__version__ = "1.0.0"

from .confint import ConfidenceInterval, print_confint
from .latex import escape_latex
from .localization import localize, package_available
from .number_format import NUMBER_FORMAT_DEFAULTS, printnum
from .report import ReportColumns, build_estimate_report
from .results import ApaResults, apa_print_container, select_parameter, set_defaults
from .stat_names import convert_stat_name
from .terms import prettify_terms, sanitize_terms, sort_effects
from .validation import ValidationError, ValidationSpec, validate

__all__ = [
    # Validation
    "ValidationError",
    "ValidationSpec",
    "validate",
    # Formatting
    "NUMBER_FORMAT_DEFAULTS",
    "printnum",
    "ConfidenceInterval",
    "print_confint",
    "convert_stat_name",
    "escape_latex",
    # Terms
    "sanitize_terms",
    "prettify_terms",
    "sort_effects",
    # Results
    "ApaResults",
    "apa_print_container",
    "select_parameter",
    "set_defaults",
    "ReportColumns",
    "build_estimate_report",
    # Localization
    "localize",
    "package_available",
]
