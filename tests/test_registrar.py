from __future__ import annotations

import threading
import time

import pytest

from pypinpoint.collaborators import InMemoryTokenStore
from pypinpoint.exceptions import PinpointMisuseError
from pypinpoint.notifications import TokenRegistrar

KEY = "com.amazonaws.AWSDeviceTokenKey"


class _FakeTargeting:
    def __init__(self) -> None:
        self.updates = 0
        self._lock = threading.Lock()

    def update_endpoint_profile(self) -> None:
        with self._lock:
            self.updates += 1


class _SlowTokenStore(InMemoryTokenStore):
    """Widens the read-compare-write window to surface races."""

    def get(self, key: str) -> bytes | None:
        value = super().get(key)
        time.sleep(0.01)
        return value


def test_identical_token_updates_endpoint_once() -> None:
    store = InMemoryTokenStore()
    targeting = _FakeTargeting()
    registrar = TokenRegistrar(store, targeting, key=KEY)

    assert registrar.on_token_received(b"\x01\x02") is True
    assert registrar.on_token_received(b"\x01\x02") is False
    assert registrar.on_token_received(bytearray(b"\x01\x02")) is False

    assert targeting.updates == 1
    assert store.get(KEY) == b"\x01\x02"


def test_changed_token_updates_endpoint_again() -> None:
    store = InMemoryTokenStore()
    targeting = _FakeTargeting()
    registrar = TokenRegistrar(store, targeting, key=KEY)

    registrar.on_token_received(b"T1")
    registrar.on_token_received(b"T2")

    assert targeting.updates == 2
    assert store.get(KEY) == b"T2"


def test_previously_persisted_token_is_not_re_registered() -> None:
    store = InMemoryTokenStore({KEY: b"T1"})
    targeting = _FakeTargeting()

    TokenRegistrar(store, targeting, key=KEY).on_token_received(b"T1")

    assert targeting.updates == 0


def test_concurrent_registration_updates_once() -> None:
    store = _SlowTokenStore()
    targeting = _FakeTargeting()
    registrar = TokenRegistrar(store, targeting, key=KEY)
    barrier = threading.Barrier(8)

    def register() -> None:
        barrier.wait()
        registrar.on_token_received(b"same-token")

    threads = [threading.Thread(target=register) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert targeting.updates == 1


def test_non_bytes_token_is_misuse() -> None:
    registrar = TokenRegistrar(InMemoryTokenStore(), _FakeTargeting(), key=KEY)
    with pytest.raises(PinpointMisuseError):
        registrar.on_token_received("abcdef")  # type: ignore[arg-type]
