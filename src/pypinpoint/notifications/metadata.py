"""Campaign metadata extraction and merging.

Campaign attributes flow to the analytics client two ways:

* globally, as a :class:`CampaignContext` that replaces the previous one
  and as individual flat global attributes, so clients that only keep a
  flat table stay in sync with the nested context;
* per event, copied onto the event being built.

Both are no-ops for payloads that are not campaign pushes.
"""

from __future__ import annotations

import logging
from typing import Any

from pypinpoint._constants import APPLICATION_STATE_ATTRIBUTE
from pypinpoint.models.campaign import CampaignContext
from pypinpoint.models.event import AnalyticsEvent
from pypinpoint.models.payload import NotificationPayload
from pypinpoint.models.state import ApplicationState
from pypinpoint.protocols import AnalyticsClient

_logger = logging.getLogger(__name__)


class MetadataMerger:
    def __init__(self, analytics: AnalyticsClient) -> None:
        self._analytics = analytics

    def merge_global(self, payload: NotificationPayload | Any) -> CampaignContext | None:
        """Install the payload's campaign as the global campaign context.

        Returns the installed context, or ``None`` when the payload is not
        a campaign push.  Processing the same payload twice leaves the same
        global state as processing it once.
        """
        notification = NotificationPayload.from_raw(payload)
        if not notification.is_campaign_push:
            return None

        context = CampaignContext(attributes=notification.campaign)
        _logger.debug("Setting global campaign attributes keys=%s", sorted(context.attributes))
        self._analytics.set_global_campaign_attributes(context)
        for key, value in context.as_mapping().items():
            self._analytics.add_global_attribute(key, value)
        return context

    def merge_into_event(self, event: AnalyticsEvent, payload: NotificationPayload | Any) -> None:
        """Copy campaign attributes onto *event*, overwriting existing keys."""
        notification = NotificationPayload.from_raw(payload)
        if not notification.is_campaign_push:
            return

        campaign = notification.campaign
        _logger.debug("Adding campaign attributes to event=%s keys=%s", event.event_type, sorted(campaign))
        for key, value in campaign.items():
            self._analytics.add_attribute(event, key, value)

    def tag_application_state(self, event: AnalyticsEvent, state: ApplicationState | int) -> None:
        """Record the lifecycle state on *event*; unrecognised states are skipped."""
        value = ApplicationState(state).attribute_value
        if value is None:
            _logger.debug("Unrecognised application state=%r; not tagging event=%s", state, event.event_type)
            return
        self._analytics.add_attribute(event, APPLICATION_STATE_ATTRIBUTE, value)
