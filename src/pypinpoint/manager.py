"""Notification lifecycle orchestration.

The host application forwards three callbacks:

* :meth:`NotificationManager.on_launch` from its launch hook,
* :meth:`NotificationManager.on_token_registered` when the platform
  hands over a device token,
* :meth:`NotificationManager.on_notification_received` for every
  delivered remote notification.

No lifecycle state is retained between calls; the state is whatever the
host reports at call time.  Calling these hooks out of order is a
precondition violation and is not detected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pypinpoint._constants import ACTION_IDENTIFIER_ATTRIBUTE, LAUNCH_NOTIFICATION_KEYS
from pypinpoint._redact import redact_payload
from pypinpoint.config import PinpointConfig
from pypinpoint.context import PinpointContext
from pypinpoint.exceptions import PinpointMisuseError
from pypinpoint.models.event import AnalyticsEvent
from pypinpoint.models.payload import NotificationPayload
from pypinpoint.models.state import ApplicationState, EventType
from pypinpoint.notifications.classifier import NotificationOutcome, classify
from pypinpoint.notifications.deeplink import DeepLinkDispatcher
from pypinpoint.notifications.metadata import MetadataMerger
from pypinpoint.notifications.registrar import TokenRegistrar

_logger = logging.getLogger(__name__)


class NotificationManager:
    """Classify campaign notifications and record the matching events.

    Usage::

        manager = NotificationManager(context)
        manager.on_launch(launch_options)
        manager.on_token_registered(device_token)
        manager.on_notification_received(payload, state)
        completion_handler(result)  # always the caller's job
    """

    def __init__(self, context: PinpointContext) -> None:
        if not isinstance(context, PinpointContext):
            raise PinpointMisuseError(
                "NotificationManager requires a PinpointContext; "
                f"got {type(context).__name__}"
            )
        self._context = context
        self._config = context.config
        self._analytics = context.analytics
        self._merger = MetadataMerger(context.analytics)
        self._registrar = TokenRegistrar(
            context.token_store,
            context.targeting,
            key=context.config.device_token_key,
        )
        self._deep_links = DeepLinkDispatcher(context.opener, context.scheduler)

    @classmethod
    def from_config(cls, config: PinpointConfig | None = None, **collaborators: Any) -> NotificationManager:
        """Build a manager from *config* and keyword collaborators.

        Keywords match the :class:`PinpointContext` fields.
        """
        return cls(PinpointContext(config=config or PinpointConfig.from_env(), **collaborators))

    @property
    def context(self) -> PinpointContext:
        return self._context

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------

    def is_notification_enabled(self) -> bool:
        """Whether the user can currently receive remote notifications."""
        permissions = self._context.permissions
        if not permissions.is_registered_for_remote_notifications():
            return False
        return bool(permissions.current_notification_types())

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def on_launch(self, launch_options: Mapping[str, Any] | None = None) -> bool:
        """Record an opened event when the app was launched by a notification.

        The deep link is not followed here unless
        ``config.resolve_deep_link_on_launch`` is set; cold-launch
        navigation belongs to the host's own launch routing.  Always
        returns ``True`` so it can be returned from the host's launch hook.
        """
        raw = _launch_notification(launch_options)
        if raw is None:
            return True

        payload = NotificationPayload.from_raw(raw)
        self._log_payload("launch", payload)
        if not payload.is_campaign_push:
            _logger.debug("Launch notification is not a campaign push; ignoring")
            return True

        state = ApplicationState(self._context.state_provider.application_state())
        outcome = classify(launched_from_notification=True, state=state)
        _logger.debug("App launched from notification state=%s", state.name)
        self._merger.merge_global(payload)
        self.record_opened(state, identifier=payload.action_identifier)
        if outcome.resolve_deep_link and self._config.resolve_deep_link_on_launch:
            self._resolve_deep_link(payload)
        return True

    def on_token_registered(self, token: bytes) -> bool:
        """Persist *token*; return ``True`` if the endpoint profile was refreshed."""
        return self._registrar.on_token_received(token)

    def on_notification_received(
        self,
        payload: NotificationPayload | Mapping[str, Any],
        state: ApplicationState | int,
        completion: Callable[..., Any] | None = None,
    ) -> NotificationOutcome:
        """Classify a delivered notification and record its event.

        *completion* is accepted so host callbacks can be forwarded
        verbatim but it is never invoked: the caller must invoke it after
        this method returns.  Invoking it twice is fatal on the host side.
        """
        notification = NotificationPayload.from_raw(payload)
        lifecycle_state = ApplicationState(state)
        outcome = classify(launched_from_notification=False, state=lifecycle_state)
        self._log_payload("receive", notification)
        _logger.debug(
            "Notification received state=%s event=%s campaign=%s",
            lifecycle_state.name,
            outcome.event_type,
            notification.is_campaign_push,
        )

        if outcome.merge_global:
            self._merger.merge_global(notification)

        if outcome.event_type == EventType.OPENED:
            self.record_opened(lifecycle_state, identifier=notification.action_identifier)
        else:
            self.record_received(
                notification,
                outcome.event_type,
                lifecycle_state,
                include_campaign_metadata=outcome.include_campaign_metadata,
            )

        if outcome.resolve_deep_link:
            self._resolve_deep_link(notification)
        return outcome

    # ------------------------------------------------------------------
    # Event recorders
    # ------------------------------------------------------------------

    def record_opened(
        self,
        state: ApplicationState | int,
        *,
        identifier: str | None = None,
    ) -> AnalyticsEvent:
        """Record that the user opened a notification.

        Campaign metadata reaches this event through the global campaign
        context, not as per-event attributes.
        """
        event = self._analytics.create_event(EventType.OPENED.value)
        if identifier:
            self._analytics.add_attribute(event, ACTION_IDENTIFIER_ATTRIBUTE, identifier)
        self._merger.tag_application_state(event, state)
        self._analytics.record(event)
        return event

    def record_received(
        self,
        payload: NotificationPayload | Mapping[str, Any],
        event_type: EventType | str,
        state: ApplicationState | int,
        *,
        include_campaign_metadata: bool = True,
    ) -> AnalyticsEvent:
        """Record that a notification was delivered without user interaction."""
        event = self._analytics.create_event(str(event_type))
        self._merger.tag_application_state(event, state)
        if include_campaign_metadata:
            self._merger.merge_into_event(event, payload)
        self._analytics.record(event)
        return event

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_deep_link(self, payload: NotificationPayload) -> None:
        if not self._config.deep_links_enabled:
            _logger.debug("Deep links disabled; not resolving")
            return
        self._deep_links.resolve(payload)

    def _log_payload(self, origin: str, payload: NotificationPayload) -> None:
        if not _logger.isEnabledFor(logging.DEBUG):
            return
        _logger.debug(
            "Notification payload origin=%s payload=%s",
            origin,
            redact_payload(payload.raw, campaign_values=self._config.log_payloads),
        )


def _launch_notification(launch_options: Mapping[str, Any] | None) -> Any:
    if not launch_options:
        return None
    for key in LAUNCH_NOTIFICATION_KEYS:
        value = launch_options.get(key)
        if value:
            return value
    return None
