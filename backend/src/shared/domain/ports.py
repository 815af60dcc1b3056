from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class IdGenerator(Protocol):
    def generate(self) -> str: ...


class AccessCodeGenerator(Protocol):
    """Returns a candidate code. Candidates may repeat."""

    def generate(self) -> str: ...
