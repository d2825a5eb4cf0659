"""Application lifecycle state and campaign event types."""

from __future__ import annotations

from enum import StrEnum

from pypinpoint.models._base import PinpointEnum


class ApplicationState(PinpointEnum):
    """Host application lifecycle state, read at call time.

    Values mirror the platform's raw constants.  Anything else resolves
    to ``UNKNOWN``.
    """

    UNKNOWN = -1
    ACTIVE = 0
    INACTIVE = 1
    BACKGROUND = 2

    @property
    def attribute_value(self) -> str | None:
        """Literal written to the ``applicationState`` event attribute."""
        return _STATE_ATTRIBUTE_VALUES.get(self)


_STATE_ATTRIBUTE_VALUES: dict[ApplicationState, str] = {
    ApplicationState.ACTIVE: "UIApplicationStateActive",
    ApplicationState.INACTIVE: "UIApplicationStateInactive",
    ApplicationState.BACKGROUND: "UIApplicationStateBackground",
}


class EventType(StrEnum):
    """Analytics event types recorded for campaign notifications."""

    OPENED = "_campaign.opened_notification"
    RECEIVED_FOREGROUND = "_campaign.received_foreground"
    RECEIVED_BACKGROUND = "_campaign.received_background"
