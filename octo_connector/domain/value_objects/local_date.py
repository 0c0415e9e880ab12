"""Conversión de fechas del host al formato local del proveedor (YYYY-MM-DD)."""

import re
from datetime import date, datetime
from functools import lru_cache

from octo_connector.domain.errors import ValidationError

OCTO_DATE_FORMAT = "%Y-%m-%d"

# Tokens estilo moment.js que usa el host, del más largo al más corto.
_MOMENT_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MM": "%m",
    "M": "%m",
    "DD": "%d",
    "D": "%d",
    "HH": "%H",
    "H": "%H",
    "mm": "%M",
    "ss": "%S",
}
_TOKEN_PATTERNS = {
    "YYYY": r"\d{4}",
    "YY": r"\d{2}",
    "MM": r"\d{1,2}",
    "M": r"\d{1,2}",
    "DD": r"\d{1,2}",
    "D": r"\d{1,2}",
    "HH": r"\d{1,2}",
    "H": r"\d{1,2}",
    "mm": r"\d{1,2}",
    "ss": r"\d{1,2}",
}
_TOKEN_RE = re.compile("|".join(sorted(_MOMENT_TOKENS, key=len, reverse=True)))


def moment_to_strptime(date_format: str) -> str:
    """Traduce un formato moment (``DD/MM/YYYY``) a uno de ``strptime`` (``%d/%m/%Y``)."""
    escaped = date_format.replace("%", "%%")
    return _TOKEN_RE.sub(lambda m: _MOMENT_TOKENS[m.group(0)], escaped)


@lru_cache(maxsize=64)
def _prefix_pattern(date_format: str) -> re.Pattern:
    """Regex del tramo inicial que cubre el formato; el resto del valor se ignora, como en moment."""
    parts = []
    position = 0
    for token in _TOKEN_RE.finditer(date_format):
        parts.append(re.escape(date_format[position:token.start()]))
        parts.append(_TOKEN_PATTERNS[token.group(0)])
        position = token.end()
    parts.append(re.escape(date_format[position:]))
    return re.compile("".join(parts))


def _parse_iso(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        # Fecha con hora (``2026-12-01T00:00:00.000Z``): se toma la fecha tal como viene escrita.
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def _parse_with_format(value: str, date_format: str) -> date:
    match = _prefix_pattern(date_format).match(value.strip())
    if not match:
        raise ValueError(f"'{value}' does not start with '{date_format}'")
    return datetime.strptime(match.group(0), moment_to_strptime(date_format)).date()


def parse_host_date(value: str | date, date_format: str | None = None, field: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationError(field, "a date is required")
    if not isinstance(value, str):
        raise ValidationError(field, f"'{value}' is not a date")
    try:
        if date_format:
            return _parse_with_format(value, date_format)
        return _parse_iso(value)
    except ValueError as exc:
        raise ValidationError(
            field, f"'{value}' does not match format '{date_format or 'YYYY-MM-DD'}'"
        ) from exc


def to_local_date(value: str | date, date_format: str | None = None, field: str = "date") -> str:
    """Normaliza una fecha del host a la representación ``localDate`` de OCTO."""
    return parse_host_date(value, date_format, field).strftime(OCTO_DATE_FORMAT)
