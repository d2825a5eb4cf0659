from __future__ import annotations

from pypinpoint.collaborators import InMemoryAnalyticsClient
from pypinpoint.models import ApplicationState, CampaignContext, EventType
from pypinpoint.notifications import MetadataMerger

CAMPAIGN_PUSH = {"data": {"pinpoint": {"campaign": {"campaign_id": "42", "segment": "vip"}}}}


class _RecordingAnalytics(InMemoryAnalyticsClient):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, object]] = []

    def set_global_campaign_attributes(self, context: CampaignContext) -> None:
        self.calls.append(("set_global_campaign_attributes", dict(context.attributes)))
        super().set_global_campaign_attributes(context)

    def add_global_attribute(self, key: str, value: str) -> None:
        self.calls.append(("add_global_attribute", (key, value)))
        super().add_global_attribute(key, value)


def test_merge_global_sets_context_and_flat_attributes() -> None:
    analytics = _RecordingAnalytics()
    context = MetadataMerger(analytics).merge_global(CAMPAIGN_PUSH)

    assert context is not None
    assert analytics.campaign_context.attributes == {"campaign_id": "42", "segment": "vip"}
    assert analytics.global_attributes == {"campaign_id": "42", "segment": "vip"}
    # The context is installed before the flat attributes.
    assert analytics.calls[0][0] == "set_global_campaign_attributes"


def test_merge_global_is_idempotent() -> None:
    analytics = InMemoryAnalyticsClient()
    merger = MetadataMerger(analytics)

    merger.merge_global(CAMPAIGN_PUSH)
    once = (dict(analytics.global_attributes), analytics.campaign_context)
    merger.merge_global(CAMPAIGN_PUSH)

    assert analytics.global_attributes == once[0]
    assert analytics.campaign_context == once[1]


def test_merge_global_last_campaign_wins() -> None:
    analytics = InMemoryAnalyticsClient()
    merger = MetadataMerger(analytics)
    analytics.add_global_attribute("host_key", "kept")

    merger.merge_global(CAMPAIGN_PUSH)
    merger.merge_global({"data": {"pinpoint": {"campaign": {"campaign_id": "43"}}}})

    assert analytics.campaign_context.attributes == {"campaign_id": "43"}
    assert analytics.global_attributes == {"host_key": "kept", "campaign_id": "43"}


def test_merge_global_without_campaign_clears_context() -> None:
    analytics = InMemoryAnalyticsClient()
    merger = MetadataMerger(analytics)

    merger.merge_global(CAMPAIGN_PUSH)
    context = merger.merge_global({"data": {"pinpoint": {}}})

    assert context is not None
    assert context.attributes == {}
    assert analytics.global_attributes == {}


def test_invalid_payload_is_a_no_op() -> None:
    analytics = _RecordingAnalytics()
    merger = MetadataMerger(analytics)
    event = analytics.create_event(EventType.RECEIVED_FOREGROUND.value)

    for raw in ({}, {"data": {"campaign": {"campaign_id": "42"}}}, {"data": {"pinpoint": "x"}}):
        assert merger.merge_global(raw) is None
        merger.merge_into_event(event, raw)

    assert analytics.calls == []
    assert analytics.global_attributes == {}
    assert event.attributes == {}


def test_merge_into_event_overwrites_existing_keys() -> None:
    analytics = InMemoryAnalyticsClient()
    merger = MetadataMerger(analytics)
    event = analytics.create_event(EventType.RECEIVED_BACKGROUND.value)
    event.add_attribute("campaign_id", "old")
    event.add_attribute("other", "x")

    merger.merge_into_event(event, CAMPAIGN_PUSH)

    assert event.attributes == {"campaign_id": "42", "segment": "vip", "other": "x"}


def test_tag_application_state() -> None:
    analytics = InMemoryAnalyticsClient()
    merger = MetadataMerger(analytics)

    expected = {
        ApplicationState.ACTIVE: "UIApplicationStateActive",
        ApplicationState.INACTIVE: "UIApplicationStateInactive",
        ApplicationState.BACKGROUND: "UIApplicationStateBackground",
    }
    for state, value in expected.items():
        event = analytics.create_event(EventType.OPENED.value)
        merger.tag_application_state(event, state)
        assert event.attributes == {"applicationState": value}


def test_tag_unrecognised_state_writes_nothing() -> None:
    analytics = InMemoryAnalyticsClient()
    merger = MetadataMerger(analytics)
    event = analytics.create_event(EventType.OPENED.value)

    merger.tag_application_state(event, 12)
    merger.tag_application_state(event, ApplicationState.UNKNOWN)

    assert event.attributes == {}
