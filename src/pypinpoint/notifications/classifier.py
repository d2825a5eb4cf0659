"""Map launch context and lifecycle state to the event to record.

A notification delivered while the app is ``INACTIVE`` means the user
tapped it to bring the app forward, which is indistinguishable from a
cold launch by tap.  Both converge on ``OPENED`` plus deep-link
resolution.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pypinpoint.models.state import ApplicationState, EventType


class NotificationOutcome(BaseModel):
    """What to do for one notification."""

    model_config = ConfigDict(frozen=True)

    event_type: EventType
    resolve_deep_link: bool = False
    include_campaign_metadata: bool = False
    merge_global: bool = True


_OPENED = NotificationOutcome(event_type=EventType.OPENED, resolve_deep_link=True)
_RECEIVED_BACKGROUND = NotificationOutcome(
    event_type=EventType.RECEIVED_BACKGROUND,
    include_campaign_metadata=True,
)
_RECEIVED_FOREGROUND = NotificationOutcome(
    event_type=EventType.RECEIVED_FOREGROUND,
    include_campaign_metadata=True,
)

_DELIVERED: dict[ApplicationState, NotificationOutcome] = {
    ApplicationState.INACTIVE: _OPENED,
    ApplicationState.BACKGROUND: _RECEIVED_BACKGROUND,
    ApplicationState.ACTIVE: _RECEIVED_FOREGROUND,
    # Unrecognised platform states are treated as a plain delivery; the
    # state attribute is simply left off the event.
    ApplicationState.UNKNOWN: _RECEIVED_FOREGROUND,
}


def classify(*, launched_from_notification: bool, state: ApplicationState | int) -> NotificationOutcome:
    """Decide the event type and follow-up work for a notification."""
    if launched_from_notification:
        return _OPENED
    return _DELIVERED[ApplicationState(state)]
