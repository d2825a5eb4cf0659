"""Notification handling components, leaf to root."""

from pypinpoint.notifications.classifier import NotificationOutcome, classify
from pypinpoint.notifications.deeplink import DeepLinkDispatcher, parse_deep_link
from pypinpoint.notifications.metadata import MetadataMerger
from pypinpoint.notifications.registrar import TokenRegistrar
from pypinpoint.notifications.validator import is_campaign_push

__all__ = [
    "DeepLinkDispatcher",
    "MetadataMerger",
    "NotificationOutcome",
    "TokenRegistrar",
    "classify",
    "is_campaign_push",
    "parse_deep_link",
]
