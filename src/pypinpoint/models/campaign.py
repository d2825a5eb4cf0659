"""Global campaign context model."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class CampaignContext(BaseModel):
    """Campaign attributes attached to every subsequently recorded event.

    Contract: the context is replaced wholesale each time a campaign
    notification is processed.  The last campaign wins; attributes from
    an earlier campaign never survive into a later context.
    """

    model_config = ConfigDict(frozen=True)

    attributes: dict[str, str] = Field(default_factory=dict)

    def as_mapping(self) -> Mapping[str, str]:
        """Read-only view of the attributes."""
        return MappingProxyType(self.attributes)
