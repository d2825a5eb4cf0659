from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest

from pypinpoint.collaborators import LoopScheduler
from pypinpoint.notifications import DeepLinkDispatcher, parse_deep_link


class _FakeOpener:
    def __init__(self, *, openable: bool = True, fail_open: bool = False) -> None:
        self.openable = openable
        self.fail_open = fail_open
        self.checked: list[str] = []
        self.opened: list[str] = []

    def can_open(self, uri: str) -> bool:
        self.checked.append(str(uri))
        return self.openable

    def open(self, uri: str) -> None:
        if self.fail_open:
            raise RuntimeError("no handler")
        self.opened.append(str(uri))


class _QueueScheduler:
    def __init__(self) -> None:
        self.pending: list[Callable[[], None]] = []

    def submit(self, fn: Callable[[], None]) -> None:
        self.pending.append(fn)

    def run_all(self) -> None:
        while self.pending:
            self.pending.pop(0)()


def _push(deeplink: object) -> dict:
    return {"data": {"pinpoint": {"deeplink": deeplink}}}


def test_parse_deep_link_keeps_the_campaign_string() -> None:
    assert parse_deep_link("myapp://promo/42") == "myapp://promo/42"
    assert parse_deep_link("https://example.com") == "https://example.com"
    assert parse_deep_link("  https://example.com/a?b=1#top ") == "https://example.com/a?b=1#top"
    assert parse_deep_link("promo/42") == "promo/42"


@pytest.mark.parametrize("value", ["not a uri####", "", "   ", "a#b#c", "myapp://x/%zz", "https://exa mple.com"])
def test_parse_deep_link_rejects_malformed(value: str) -> None:
    assert parse_deep_link(value) is None


def test_open_is_scheduled_not_inline() -> None:
    opener = _FakeOpener()
    scheduler = _QueueScheduler()
    dispatcher = DeepLinkDispatcher(opener, scheduler)

    assert dispatcher.resolve(_push("myapp://promo/42")) is True
    assert opener.opened == []

    scheduler.run_all()
    assert opener.opened == ["myapp://promo/42"]


@pytest.mark.parametrize(
    "raw",
    [
        _push("not a uri####"),
        _push(None),
        _push(42),
        {"data": {"pinpoint": {}}},
        {"data": {"deeplink": "myapp://promo/42"}},
        {"deeplink": "myapp://promo/42"},
    ],
)
def test_invalid_deep_links_never_open(raw: dict) -> None:
    opener = _FakeOpener()
    scheduler = _QueueScheduler()

    assert DeepLinkDispatcher(opener, scheduler).resolve(raw) is False

    scheduler.run_all()
    assert opener.opened == []
    assert scheduler.pending == []


def test_unopenable_deep_link_never_opens() -> None:
    opener = _FakeOpener(openable=False)
    scheduler = _QueueScheduler()

    assert DeepLinkDispatcher(opener, scheduler).resolve(_push("myapp://promo/42")) is False

    assert opener.checked == ["myapp://promo/42"]
    assert scheduler.pending == []
    assert opener.opened == []


def test_open_failure_is_swallowed() -> None:
    opener = _FakeOpener(fail_open=True)
    scheduler = _QueueScheduler()

    assert DeepLinkDispatcher(opener, scheduler).resolve(_push("myapp://promo/42")) is True
    scheduler.run_all()

    assert opener.opened == []


@pytest.mark.asyncio
async def test_loop_scheduler_runs_on_later_iteration() -> None:
    opener = _FakeOpener()
    dispatcher = DeepLinkDispatcher(opener, LoopScheduler(asyncio.get_running_loop()))

    dispatcher.resolve(_push("https://example.com/offers?id=7"))
    assert opener.opened == []

    await asyncio.sleep(0)
    assert opener.opened == ["https://example.com/offers?id=7"]


class _FailingScheduler:
    def submit(self, fn: Callable[[], None]) -> None:
        raise RuntimeError("Event loop is closed")


def test_opener_receives_exact_link() -> None:
    opener = _FakeOpener()
    scheduler = _QueueScheduler()
    dispatcher = DeepLinkDispatcher(opener, scheduler)

    dispatcher.resolve(_push("https://example.com"))
    dispatcher.resolve(_push("promo/42"))
    scheduler.run_all()

    assert opener.checked == ["https://example.com", "promo/42"]
    assert opener.opened == ["https://example.com", "promo/42"]


def test_scheduler_failure_is_swallowed() -> None:
    opener = _FakeOpener()

    assert DeepLinkDispatcher(opener, _FailingScheduler()).resolve(_push("myapp://promo/42")) is False
    assert opener.opened == []


def test_closed_loop_scheduler_does_not_raise() -> None:
    loop = asyncio.new_event_loop()
    loop.close()
    opener = _FakeOpener()

    assert DeepLinkDispatcher(opener, LoopScheduler(loop)).resolve(_push("myapp://promo/42")) is False
    assert opener.opened == []
