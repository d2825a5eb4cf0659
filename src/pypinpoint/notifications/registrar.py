"""Idempotent device-token registration."""

from __future__ import annotations

import logging
import threading

from pypinpoint._redact import redact_for_log
from pypinpoint.exceptions import PinpointMisuseError
from pypinpoint.protocols import TargetingClient, TokenStore

_logger = logging.getLogger(__name__)


class TokenRegistrar:
    """Persist the device token and refresh the endpoint only on change.

    Platforms re-deliver the same token on every cold start, so an
    unchanged token must not trigger another endpoint update.  The
    read-compare-write sequence runs under a lock so two concurrent
    deliveries cannot both observe a change.
    """

    def __init__(self, store: TokenStore, targeting: TargetingClient, *, key: str) -> None:
        self._store = store
        self._targeting = targeting
        self._key = key
        self._lock = threading.Lock()

    def on_token_received(self, token: bytes) -> bool:
        """Register *token*; return ``True`` if the endpoint update was triggered."""
        if not isinstance(token, (bytes, bytearray, memoryview)):
            raise PinpointMisuseError(f"device token must be bytes, got {type(token).__name__}")
        new_token = bytes(token)

        with self._lock:
            current = self._store.get(self._key)
            if current is not None and bytes(current) == new_token:
                _logger.debug("Device token unchanged token=%s", redact_for_log(new_token))
                return False
            self._store.set(self._key, new_token)

        _logger.info("Device token changed; updating endpoint profile token=%s", redact_for_log(new_token))
        self._targeting.update_endpoint_profile()
        return True
