"""Collaborator bundle handed to the notification manager."""

from __future__ import annotations

import dataclasses

from pypinpoint.config import PinpointConfig
from pypinpoint.protocols import (
    AnalyticsClient,
    ApplicationStateProvider,
    PermissionQuery,
    TargetingClient,
    TokenStore,
    UiScheduler,
    UriOpener,
)


@dataclasses.dataclass(frozen=True)
class PinpointContext:
    """Everything the notification manager talks to.

    Parameters
    ----------
    analytics : AnalyticsClient
        Receives events and the global campaign context.
    targeting : TargetingClient
        Refreshes the endpoint profile when the device token changes.
    token_store : TokenStore
        Persists the last registered device token.
    permissions : PermissionQuery
        OS notification permission query.
    opener : UriOpener
        Opens deep links.
    scheduler : UiScheduler
        UI-affine context deep links are opened on.
    state_provider : ApplicationStateProvider
        Reads the lifecycle state at launch time.
    config : PinpointConfig
        Behaviour switches.
    """

    analytics: AnalyticsClient
    targeting: TargetingClient
    token_store: TokenStore
    permissions: PermissionQuery
    opener: UriOpener
    scheduler: UiScheduler
    state_provider: ApplicationStateProvider
    config: PinpointConfig = dataclasses.field(default_factory=PinpointConfig)
