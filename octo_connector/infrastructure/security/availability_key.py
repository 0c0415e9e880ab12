"""
Availability keys.

An availability key is an HS256 JWT minted while translating an availability
record. It carries everything the create-booking call needs (product, option,
availability slot, unit items, currency) so the host only has to hand the key
back; nothing is stored on our side between the two calls.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from octo_connector.domain.errors import InvalidAvailabilityKeyError

ALGORITHM = "HS256"
TOKEN_METADATA_CLAIMS = ("iat", "exp", "currency")


def encode_availability_key(
    claims: dict[str, Any],
    secret: str,
    ttl_seconds: int | None = None,
) -> str:
    if not secret:
        raise InvalidAvailabilityKeyError("signing secret is not configured")
    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload["iat"] = int(now.timestamp())
    if ttl_seconds:
        payload["exp"] = int((now + timedelta(seconds=ttl_seconds)).timestamp())
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_availability_key(token: str, secret: str) -> dict[str, Any]:
    if not secret:
        raise InvalidAvailabilityKeyError("signing secret is not configured")
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise InvalidAvailabilityKeyError("the availability key has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidAvailabilityKeyError(str(exc) or exc.__class__.__name__) from exc


def booking_claims(decoded: dict[str, Any]) -> dict[str, Any]:
    """Claims to forward to the supplier's create-booking call."""
    return {key: value for key, value in decoded.items() if key not in TOKEN_METADATA_CLAIMS}


def unit_items(units_with_quantity: list[dict[str, Any]] | None) -> list[dict[str, str]]:
    """Expand ``[{unitId, quantity}]`` into one OCTO unit item per traveller."""
    items: list[dict[str, str]] = []
    for unit in units_with_quantity or []:
        items.extend({"unitId": unit["unitId"]} for _ in range(int(unit.get("quantity", 1))))
    return items
