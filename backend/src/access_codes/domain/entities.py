from dataclasses import dataclass
from datetime import datetime

from shared.domain.time import as_utc
from shared.exceptions import ValidationError


@dataclass(frozen=True)
class AccessCode:
    code: str
    document_id: str
    expires_at: datetime | None = None

    def __post_init__(self):
        if not self.code or not self.code.strip():
            raise ValidationError("AccessCode code cannot be empty")
        if not self.document_id or not self.document_id.strip():
            raise ValidationError("AccessCode document_id cannot be empty")
        if self.expires_at is not None:
            if not isinstance(self.expires_at, datetime):
                raise ValidationError("AccessCode expires_at must be a valid datetime or None")
            object.__setattr__(self, "expires_at", as_utc(self.expires_at))

    def is_expired(self, now: datetime) -> bool:
        # Still valid at exactly expires_at
        if self.expires_at is None:
            return False
        return as_utc(now) > self.expires_at


def expiry_sort_key(access_code: AccessCode) -> tuple:
    """Ascending by expires_at with never-expiring codes first."""
    if access_code.expires_at is None:
        return (0, access_code.code)
    return (1, access_code.expires_at, access_code.code)
