from typing import Protocol

from access_codes.domain.entities import AccessCode


class AccessCodeRepository(Protocol):
    async def save(self, access_code: AccessCode) -> AccessCode:
        """Insert or overwrite the record stored under access_code.code."""
        ...

    async def add(self, access_code: AccessCode) -> AccessCode:
        """Insert a new record. Raises ConflictError if the code is taken."""
        ...

    async def find_by_code(self, code: str) -> AccessCode | None: ...

    async def find_by_document_id(self, document_id: str) -> list[AccessCode]: ...

    async def find_all(self) -> list[AccessCode]: ...

    async def delete(self, code: str) -> None: ...
