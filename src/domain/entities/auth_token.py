from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class AuthToken:
    """A bearer token issued by the accounts subsystem. Read-only here."""

    token: str
    username: str
    expiry: datetime

    def is_valid_at(self, now: datetime) -> bool:
        """A token expiring exactly at `now` is already invalid."""
        expiry = self.expiry
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return expiry > now
