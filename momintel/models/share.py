"""Read-only share token for a meeting's MoM."""

import secrets
from datetime import datetime

from pydantic import ConfigDict, Field

from momintel.models.base import Record, utc_now


def new_share_id() -> str:
    """Random 32-character hex token."""
    return secrets.token_hex(16)


class MomShare(Record):
    """Persistent share token; minted once per meeting and reused."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_share_id)
    created_at: datetime = Field(default_factory=utc_now)

    def url_for(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/share/mom/{self.id}"


class MomShareLink(Record):
    """A share token resolved against a base URL."""

    id: str
    created_at: datetime
    url: str
