"""Custom exception hierarchy for pypinpoint.

Notification handling itself never raises: malformed payloads and bad
deep links degrade to no-ops.  The exceptions below cover configuration
problems and precondition violations by the host application.
"""

from __future__ import annotations


class PinpointError(Exception):
    """Base exception for all pypinpoint errors."""


class PinpointConfigError(PinpointError):
    """Invalid or unparsable configuration value."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class PinpointMisuseError(PinpointError):
    """A lifecycle hook was called in violation of its preconditions.

    Raised for programmer errors such as passing a non-bytes device
    token or building a :class:`~pypinpoint.manager.NotificationManager`
    without a context.  These are never caught by the library.
    """
