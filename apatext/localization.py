"""Phrases used in manuscripts, and environment queries."""

from __future__ import annotations

import importlib.util
from typing import Dict

_PHRASES: Dict[str, Dict[str, str]] = {
    "english": {
        "author_note": "Author note",
        "abstract": "Abstract",
        "keywords": "Keywords",
        "word_count": "Word count",
        "table": "Table",
        "figure": "Figure",
        "note": "Note",
        "correspondence": "Correspondence concerning this article should be addressed to ",
        "email": "E-mail",
    },
    "german": {
        "author_note": "Anmerkung des Autors",
        "abstract": "Zusammenfassung",
        "keywords": "Schlüsselwörter",
        "word_count": "Wortanzahl",
        "table": "Tabelle",
        "figure": "Abbildung",
        "note": "Anmerkung",
        "correspondence": "Schriftverkehr diesen Artikel betreffend sollte adressiert sein an ",
        "email": "E-Mail",
    },
}

DEFAULT_LANGUAGE = "english"


def localize(language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    """Return the manuscript phrases for ``language``.

    Unknown languages fall back to English.
    """
    return dict(_PHRASES.get(str(language).lower(), _PHRASES[DEFAULT_LANGUAGE]))


def package_available(name: str) -> bool:
    """Return True if the package ``name`` can be imported."""
    try:
        return importlib.util.find_spec(name) is not None
    except ModuleNotFoundError:
        # Parent package of a dotted name is missing.
        return False
