"""Value Objects del dominio del conector."""

from octo_connector.domain.value_objects.credential import API_KEY_PATTERN, Credential, token_template
from octo_connector.domain.value_objects.local_date import parse_host_date, to_local_date
from octo_connector.domain.value_objects.wildcard import wildcard_match

__all__ = [
    "API_KEY_PATTERN",
    "Credential",
    "parse_host_date",
    "to_local_date",
    "token_template",
    "wildcard_match",
]
