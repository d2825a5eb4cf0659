"""In-memory collaborator implementations.

Useful for hosts without a native store and for tests.  None of these
perform I/O.
"""

from __future__ import annotations

import asyncio
import copy
import logging
import threading
from collections.abc import Callable
from typing import Any

from pypinpoint.models.campaign import CampaignContext
from pypinpoint.models.event import AnalyticsEvent
from pypinpoint.models.state import ApplicationState

_logger = logging.getLogger(__name__)


class InMemoryTokenStore:
    """Thread-safe dict-backed token store."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._values: dict[str, bytes] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._values[key] = bytes(value)


class InMemoryAnalyticsClient:
    """Analytics client that keeps recorded events in a list.

    Global attributes are kept twice: as the current
    :class:`CampaignContext` and as a flat table.  Installing a new
    context removes the previous campaign's keys from the flat table, so
    the last campaign wins in both representations.  Every event created
    afterwards starts with a copy of the flat table.
    """

    def __init__(self) -> None:
        self.campaign_context = CampaignContext()
        self.global_attributes: dict[str, str] = {}
        self.recorded: list[AnalyticsEvent] = []

    def create_event(self, event_type: str) -> AnalyticsEvent:
        return AnalyticsEvent(event_type=event_type, attributes=dict(self.global_attributes))

    def add_attribute(self, event: AnalyticsEvent, key: str, value: str) -> None:
        event.add_attribute(key, value)

    def record(self, event: AnalyticsEvent) -> None:
        _logger.debug("Recording event=%s attributes=%d", event.event_type, len(event.attributes))
        self.recorded.append(copy.deepcopy(event))

    def set_global_campaign_attributes(self, context: CampaignContext) -> None:
        for key in self.campaign_context.as_mapping():
            self.global_attributes.pop(key, None)
        self.campaign_context = context

    def add_global_attribute(self, key: str, value: str) -> None:
        self.global_attributes[key] = value

    def events_of_type(self, event_type: str) -> list[AnalyticsEvent]:
        return [event for event in self.recorded if event.event_type == event_type]


class LoopScheduler:
    """Submit callables to an asyncio loop acting as the UI context.

    Safe to call from any thread.  Submitted callables run on a later
    loop iteration, never inline, and their outcome is not observed.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def submit(self, fn: Callable[[], Any]) -> None:
        self._loop.call_soon_threadsafe(fn)


class StaticApplicationState:
    """State provider returning a fixed, mutable lifecycle state."""

    def __init__(self, state: ApplicationState | int = ApplicationState.ACTIVE) -> None:
        self.state = state

    def application_state(self) -> ApplicationState | int:
        return self.state
