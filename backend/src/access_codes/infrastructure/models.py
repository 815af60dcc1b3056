from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database import Base


class AccessCodeModel(Base):
    __tablename__ = "access_codes"

    # Primary key doubles as the uniqueness constraint on issued codes
    code: Mapped[str] = mapped_column(String(64), primary_key=True)
    # No foreign key: a code may outlive its document
    document_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
