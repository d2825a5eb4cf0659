"""Campaign push detection."""

from __future__ import annotations

from typing import Any

from pypinpoint.models.payload import NotificationPayload, pinpoint_envelope


def is_campaign_push(payload: NotificationPayload | Any) -> bool:
    """Return ``True`` iff ``data`` and ``data.pinpoint`` are both mappings.

    Missing ``campaign``/``deeplink`` sub-keys are tolerated; consumers
    treat them as empty.
    """
    if isinstance(payload, NotificationPayload):
        return payload.is_campaign_push
    return pinpoint_envelope(payload) is not None
