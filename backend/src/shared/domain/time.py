from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Return the same instant in UTC. Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
