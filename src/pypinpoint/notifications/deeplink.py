"""Guarded deep-link navigation for opened campaign notifications."""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from pypinpoint.models.payload import NotificationPayload
from pypinpoint.protocols import UiScheduler, UriOpener

_logger = logging.getLogger(__name__)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

# Characters permitted in a URI reference; anything else (whitespace,
# quotes, angle brackets) must arrive percent-encoded.
_URI_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+$")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


def parse_deep_link(value: str) -> str | None:
    """Return *value* stripped if it is a valid URI reference, else ``None``.

    Absolute URIs must also pass pydantic's ``AnyUrl`` validation;
    relative references such as ``promo/42`` are accepted as-is.  The
    returned string is never normalised, so the opener sees exactly what
    the campaign sent.
    """
    link = value.strip()
    if not link or not _URI_CHARS.match(link) or _BAD_PERCENT.search(link):
        return None
    if link.count("#") > 1:
        return None
    if _SCHEME.match(link):
        try:
            _URL_ADAPTER.validate_python(link)
        except ValidationError:
            return None
    return link


class DeepLinkDispatcher:
    """Open ``data.pinpoint.deeplink`` on the UI context when the host allows it.

    A malformed or unopenable deep link never blocks notification
    processing: every failure here is logged at DEBUG and dropped.
    """

    def __init__(self, opener: UriOpener, scheduler: UiScheduler) -> None:
        self._opener = opener
        self._scheduler = scheduler

    def resolve(self, payload: NotificationPayload | Any) -> bool:
        """Schedule opening the deep link; return ``True`` if scheduled."""
        notification = NotificationPayload.from_raw(payload)
        if not notification.is_campaign_push:
            return False
        link = notification.deeplink
        if link is None:
            return False

        _logger.debug("Received deep link %s", link)
        uri = parse_deep_link(link)
        if uri is None:
            _logger.debug("Ignoring unparsable deep link %r", link)
            return False

        try:
            openable = self._opener.can_open(uri)
        except Exception:  # noqa: BLE001
            _logger.debug("can_open failed for deep link %s", uri, exc_info=True)
            return False
        if not openable:
            _logger.debug("Host cannot open deep link %s", uri)
            return False

        try:
            self._scheduler.submit(lambda: self._open(uri))
        except Exception:  # noqa: BLE001
            _logger.debug("Could not schedule deep link %s", uri, exc_info=True)
            return False
        return True

    def _open(self, uri: str) -> None:
        try:
            self._opener.open(uri)
        except Exception:  # noqa: BLE001
            _logger.debug("Opening deep link %s failed", uri, exc_info=True)
