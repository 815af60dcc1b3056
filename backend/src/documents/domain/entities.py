from dataclasses import dataclass
from datetime import datetime

from shared.domain.time import as_utc
from shared.exceptions import ValidationError


@dataclass(frozen=True)
class Document:
    id: str
    title: str
    content: str
    created_at: datetime

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise ValidationError("Document id cannot be empty")
        if not self.title or not self.title.strip():
            raise ValidationError("Document title cannot be empty")
        if not self.content or not self.content.strip():
            raise ValidationError("Document content cannot be empty")
        if not isinstance(self.created_at, datetime):
            raise ValidationError("Document created_at must be a valid datetime")
        object.__setattr__(self, "created_at", as_utc(self.created_at))
