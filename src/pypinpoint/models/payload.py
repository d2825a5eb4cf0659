"""Inbound notification payload model.

The payload shape is imposed by the push-delivery service::

    {
        "data": {
            "pinpoint": {
                "campaign": {"campaign_id": "42", ...},
                "deeplink": "myapp://promo/42"
            }
        }
    }

Only ``data.pinpoint`` being a mapping makes a payload a campaign push.
Every lookup below returns an empty/``None`` value on shape mismatch
instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pypinpoint._constants import CAMPAIGN_KEY, DATA_KEY, DEEPLINK_KEY, PINPOINT_KEY
from pypinpoint.models._base import attribute_value


def _mapping_at(value: Any, key: str) -> Mapping[str, Any] | None:
    if not isinstance(value, Mapping):
        return None
    nested = value.get(key)
    return nested if isinstance(nested, Mapping) else None


def pinpoint_envelope(raw: Any) -> Mapping[str, Any] | None:
    """Return ``raw["data"]["pinpoint"]`` when both levels are mappings."""
    return _mapping_at(_mapping_at(raw, DATA_KEY), PINPOINT_KEY)


class NotificationPayload(BaseModel):
    """Immutable view over a received notification."""

    model_config = ConfigDict(frozen=True)

    raw: dict[Any, Any] = Field(default_factory=dict)
    """Original payload as delivered; keys are not required to be strings."""

    action_identifier: str | None = None
    """Identifier of the notification action the user chose, if any."""

    @classmethod
    def from_raw(cls, raw: Any, *, action_identifier: str | None = None) -> NotificationPayload:
        """Wrap *raw*; non-mapping input yields an empty payload."""
        if isinstance(raw, NotificationPayload):
            if action_identifier is None:
                return raw
            return raw.model_copy(update={"action_identifier": action_identifier})
        data = dict(raw) if isinstance(raw, Mapping) else {}
        return cls(raw=data, action_identifier=action_identifier)

    @property
    def pinpoint(self) -> Mapping[str, Any] | None:
        return pinpoint_envelope(self.raw)

    @property
    def is_campaign_push(self) -> bool:
        return self.pinpoint is not None

    @property
    def campaign(self) -> dict[str, str]:
        """Campaign metadata as string attributes.

        Scalars are stringified; nested structures and nulls are dropped.
        """
        campaign = _mapping_at(self.pinpoint, CAMPAIGN_KEY)
        if campaign is None:
            return {}
        attributes: dict[str, str] = {}
        for key, value in campaign.items():
            text = attribute_value(value)
            if text is not None:
                attributes[str(key)] = text
        return attributes

    @property
    def deeplink(self) -> str | None:
        pinpoint = self.pinpoint
        if pinpoint is None:
            return None
        value = pinpoint.get(DEEPLINK_KEY)
        return value if isinstance(value, str) else None
