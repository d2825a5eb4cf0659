"""Data models for pypinpoint."""

from pypinpoint.models.campaign import CampaignContext
from pypinpoint.models.event import AnalyticsEvent
from pypinpoint.models.payload import NotificationPayload
from pypinpoint.models.state import ApplicationState, EventType

__all__ = [
    "AnalyticsEvent",
    "ApplicationState",
    "CampaignContext",
    "EventType",
    "NotificationPayload",
]
