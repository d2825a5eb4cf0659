"""Client configuration for pypinpoint."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pypinpoint._constants import DEFAULT_DEVICE_TOKEN_KEY
from pypinpoint.exceptions import PinpointConfigError

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(key: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    if not normalized:
        return default
    raise PinpointConfigError(f"{key} must be a boolean, got {value!r}", key=key)


@dataclasses.dataclass(frozen=True)
class PinpointConfig:
    """Notification handling configuration.

    Parameters
    ----------
    device_token_key : str
        Key under which the last registered device token is persisted
        in the token store.
    deep_links_enabled : bool
        Resolve ``data.pinpoint.deeplink`` when a notification is opened.
        When disabled, opened events are still recorded.
    resolve_deep_link_on_launch : bool
        Also resolve the deep link of the notification that launched the
        process.  Off by default: cold launches leave navigation to the
        host's own launch routing.
    log_payloads : bool
        Include campaign values and full deep links in DEBUG payload
        logs.  When off, campaign metadata is logged by key name only.
    """

    device_token_key: str = DEFAULT_DEVICE_TOKEN_KEY
    deep_links_enabled: bool = True
    resolve_deep_link_on_launch: bool = False
    log_payloads: bool = False

    def __post_init__(self) -> None:
        if not self.device_token_key or not self.device_token_key.strip():
            raise PinpointConfigError("device_token_key must be non-empty", key="device_token_key")

    @classmethod
    def from_env(cls, **overrides: Any) -> PinpointConfig:
        """Create configuration from ``PINPOINT_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        PinpointConfigError
            If a boolean variable holds an unrecognised value.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        token_key = env.get("PINPOINT_DEVICE_TOKEN_KEY")
        if token_key is not None:
            config_kwargs["device_token_key"] = token_key

        _ENV_BOOL_MAP = {
            "PINPOINT_DEEP_LINKS_ENABLED": ("deep_links_enabled", True),
            "PINPOINT_RESOLVE_DEEP_LINK_ON_LAUNCH": ("resolve_deep_link_on_launch", False),
            "PINPOINT_LOG_PAYLOADS": ("log_payloads", False),
        }
        for env_key, (field_name, default) in _ENV_BOOL_MAP.items():
            if field_name in overrides:
                continue
            config_kwargs[field_name] = _env_bool(env_key, env.get(env_key), default)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
