import secrets
from datetime import datetime, timezone
from uuid import uuid4

# Uppercase letters and digits without the look-alikes 0/O and 1/I
ACCESS_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidIdGenerator:
    def generate(self) -> str:
        return str(uuid4())


class RandomAccessCodeGenerator:
    def __init__(self, length: int = 8, alphabet: str = ACCESS_CODE_ALPHABET):
        if length < 1:
            raise ValueError("length must be positive")
        if not alphabet:
            raise ValueError("alphabet cannot be empty")
        self.length = length
        self.alphabet = alphabet

    def generate(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
