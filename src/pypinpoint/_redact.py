"""Helpers for safe debug logging of notification payloads.

Payloads can carry device tokens, endpoint identifiers and per-user
campaign values.  :func:`redact_payload` reduces a payload to what is
safe to log: campaign values collapse to their key names and deep-link
query strings are dropped unless the caller opts in.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pypinpoint._constants import CAMPAIGN_KEY, DATA_KEY, DEEPLINK_KEY, PINPOINT_KEY

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "token",
        "devicetoken",
        "device_token",
        "endpointid",
        "endpoint_id",
        "userid",
        "user_id",
        "authorization",
        "cookie",
    }
)

_REDACTED = "<redacted>"
_MAX_DEPTH = 12


def _scalar(value: Any, max_string: int) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        # Device tokens: length only.
        return f"<bytes:{len(bytes(value))}b>"
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


def redact_for_log(value: Any, *, max_string: int = 256, _depth: int = 0) -> Any:
    """Return a copy of *value* with sensitive keys and token bytes hidden."""
    if _depth > _MAX_DEPTH:
        return "<max-depth>"
    if isinstance(value, Mapping):
        return {
            str(key): _REDACTED
            if str(key).lower() in _SENSITIVE_KEYS
            else redact_for_log(item, max_string=max_string, _depth=_depth + 1)
            for key, item in value.items()
        }
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]
    return _scalar(value, max_string)


def _strip_query(link: str) -> str:
    for marker in ("?", "#"):
        link = link.split(marker, 1)[0]
    return link


def redact_payload(raw: Any, *, campaign_values: bool = False, max_string: int = 256) -> Any:
    """Redact a notification payload for DEBUG logging.

    Unless *campaign_values* is set, ``data.pinpoint.campaign`` is replaced
    by its sorted key names and ``data.pinpoint.deeplink`` loses its query
    and fragment.
    """
    redacted = redact_for_log(raw, max_string=max_string)
    if campaign_values or not isinstance(redacted, dict):
        return redacted

    data = redacted.get(DATA_KEY)
    pinpoint = data.get(PINPOINT_KEY) if isinstance(data, dict) else None
    if not isinstance(pinpoint, dict):
        return redacted

    campaign = pinpoint.get(CAMPAIGN_KEY)
    if isinstance(campaign, dict):
        pinpoint[CAMPAIGN_KEY] = sorted(campaign)
    link = pinpoint.get(DEEPLINK_KEY)
    if isinstance(link, str):
        pinpoint[DEEPLINK_KEY] = _strip_query(link)
    return redacted
