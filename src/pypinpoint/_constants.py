"""Internal constants shared across the library."""

# Payload envelope keys imposed by the push-delivery service.
DATA_KEY = "data"
PINPOINT_KEY = "pinpoint"
CAMPAIGN_KEY = "campaign"
DEEPLINK_KEY = "deeplink"

# Launch options keys that may carry the notification that launched the app.
LAUNCH_NOTIFICATION_KEYS: tuple[str, ...] = (
    "remote_notification",
    "UIApplicationLaunchOptionsRemoteNotificationKey",
)

# Event attribute keys.
APPLICATION_STATE_ATTRIBUTE = "applicationState"
ACTION_IDENTIFIER_ATTRIBUTE = "actionIdentifier"

DEFAULT_DEVICE_TOKEN_KEY = "com.amazonaws.AWSDeviceTokenKey"
