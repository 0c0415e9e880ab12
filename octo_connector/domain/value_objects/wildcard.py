"""Matcher de comodines usado por los filtros de catálogo."""

import re
from functools import lru_cache
from typing import Any


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    parts = (re.escape(part) for part in pattern.split("*"))
    return re.compile("^" + ".*".join(parts) + "$", re.IGNORECASE | re.DOTALL)


def wildcard_match(pattern: str, value: Any) -> bool:
    """
    ``*`` equivale a cualquier secuencia de caracteres; el resto es literal.

    La comparación es sobre el campo completo y sin distinguir mayúsculas.
    Un campo ausente o que no es string nunca coincide.
    """
    if not isinstance(value, str):
        return False
    return bool(_compile(pattern).match(value))
