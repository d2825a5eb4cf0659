"""Analytics event model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalyticsEvent(BaseModel):
    """A single analytics event under construction.

    Created fresh per notification.  Once handed to
    ``AnalyticsClient.record`` the library never touches it again.
    """

    model_config = ConfigDict(validate_assignment=True)

    event_type: str
    attributes: dict[str, str] = Field(default_factory=dict)

    @field_validator("event_type")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        event_type = value.strip()
        if not event_type:
            raise ValueError("event_type must be non-empty")
        return event_type

    def add_attribute(self, key: str, value: str) -> None:
        """Set *key* to *value*, overwriting any previous value."""
        self.attributes[key] = value
