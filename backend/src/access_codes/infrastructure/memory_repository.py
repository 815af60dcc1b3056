from access_codes.domain.entities import AccessCode, expiry_sort_key
from shared.exceptions import ConflictError


class InMemoryAccessCodeRepository:
    """Dict-backed repository.

    ``add`` checks and inserts without awaiting in between, so the uniqueness
    guarantee holds for callers sharing one event loop. It does not hold for
    an instance shared across threads or processes.
    """

    def __init__(self):
        self._access_codes: dict[str, AccessCode] = {}

    async def save(self, access_code: AccessCode) -> AccessCode:
        self._access_codes[access_code.code] = access_code
        return access_code

    async def add(self, access_code: AccessCode) -> AccessCode:
        if access_code.code in self._access_codes:
            raise ConflictError(f"Access code already exists: {access_code.code}")
        self._access_codes[access_code.code] = access_code
        return access_code

    async def find_by_code(self, code: str) -> AccessCode | None:
        return self._access_codes.get(code)

    async def find_by_document_id(self, document_id: str) -> list[AccessCode]:
        matches = [c for c in self._access_codes.values() if c.document_id == document_id]
        return sorted(matches, key=expiry_sort_key)

    async def find_all(self) -> list[AccessCode]:
        return sorted(self._access_codes.values(), key=expiry_sort_key)

    async def delete(self, code: str) -> None:
        self._access_codes.pop(code, None)

    async def clear(self) -> None:
        self._access_codes.clear()

    def count(self) -> int:
        return len(self._access_codes)
