"""Collaborator interfaces consumed by the notification manager.

The library never implements push transport, analytics upload or
persistent storage itself.  Hosts plug those in through these
protocols; :mod:`pypinpoint.collaborators` ships in-memory versions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from pypinpoint.models.campaign import CampaignContext
from pypinpoint.models.event import AnalyticsEvent
from pypinpoint.models.state import ApplicationState


@runtime_checkable
class AnalyticsClient(Protocol):
    def create_event(self, event_type: str) -> AnalyticsEvent: ...

    def add_attribute(self, event: AnalyticsEvent, key: str, value: str) -> None: ...

    def record(self, event: AnalyticsEvent) -> None:
        """Submit *event*; fire-and-forget, ownership moves to the client."""
        ...

    def set_global_campaign_attributes(self, context: CampaignContext) -> None:
        """Replace the current campaign context wholesale."""
        ...

    def add_global_attribute(self, key: str, value: str) -> None: ...


@runtime_checkable
class TargetingClient(Protocol):
    def update_endpoint_profile(self) -> None: ...


@runtime_checkable
class TokenStore(Protocol):
    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


@runtime_checkable
class PermissionQuery(Protocol):
    def is_registered_for_remote_notifications(self) -> bool: ...

    def current_notification_types(self) -> set[str]: ...


@runtime_checkable
class UriOpener(Protocol):
    """Receives the deep link exactly as the campaign sent it."""

    def can_open(self, uri: str) -> bool: ...

    def open(self, uri: str) -> None: ...


@runtime_checkable
class UiScheduler(Protocol):
    def submit(self, fn: Callable[[], None]) -> None:
        """Run *fn* later on the UI-affine context; no result is observed."""
        ...


@runtime_checkable
class ApplicationStateProvider(Protocol):
    def application_state(self) -> ApplicationState | int: ...
