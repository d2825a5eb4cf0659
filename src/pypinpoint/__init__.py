"""pypinpoint - campaign push-notification analytics and deep-link handling."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypinpoint")
except PackageNotFoundError:
    __version__ = "0+local"
from pypinpoint.collaborators import (
    InMemoryAnalyticsClient,
    InMemoryTokenStore,
    LoopScheduler,
    StaticApplicationState,
)
from pypinpoint.config import PinpointConfig
from pypinpoint.context import PinpointContext
from pypinpoint.exceptions import PinpointConfigError, PinpointError, PinpointMisuseError
from pypinpoint.manager import NotificationManager
from pypinpoint.models import (
    AnalyticsEvent,
    ApplicationState,
    CampaignContext,
    EventType,
    NotificationPayload,
)
from pypinpoint.notifications import NotificationOutcome, is_campaign_push

__all__ = [
    "__version__",
    "AnalyticsEvent",
    "ApplicationState",
    "CampaignContext",
    "EventType",
    "InMemoryAnalyticsClient",
    "InMemoryTokenStore",
    "LoopScheduler",
    "NotificationManager",
    "NotificationOutcome",
    "NotificationPayload",
    "PinpointConfig",
    "PinpointConfigError",
    "PinpointContext",
    "PinpointError",
    "PinpointMisuseError",
    "StaticApplicationState",
    "is_campaign_push",
]
