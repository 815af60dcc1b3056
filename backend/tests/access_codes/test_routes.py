from datetime import datetime, timedelta, timezone

import pytest

from access_codes.domain.entities import AccessCode
from documents.domain.entities import Document
from shared.infrastructure.repository_factory import create_repositories

T0 = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repos(db):
    return create_repositories("sql", db)


async def test_redeem_valid_code(client, repos):
    await repos.document_repository.save(
        Document(
            id="doc-123",
            title="Test Document",
            content="This is test content",
            created_at=datetime(2025, 1, 1, 9, 0, 0, tzinfo=timezone.utc),
        )
    )
    await repos.access_code_repository.save(
        AccessCode(code="VALID123", document_id="doc-123", expires_at=T0 + timedelta(hours=1))
    )

    resp = await client.get("/api/public/VALID123")
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Test Document"
    assert body["content"] == "This is test content"
    assert datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00")) == datetime(
        2025, 1, 1, 9, 0, 0, tzinfo=timezone.utc
    )


async def test_redeem_unknown_code(client):
    resp = await client.get("/api/public/UNKNOWN123")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Access code not found"}


async def test_redeem_orphaned_code(client, repos):
    await repos.access_code_repository.save(AccessCode(code="ORPHAN", document_id="missing"))
    resp = await client.get("/api/public/ORPHAN")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Document not found"}


async def test_redeem_expired_code(client, clock):
    created = await client.post(
        "/api/v1/documents", json={"title": "T", "content": "C", "expiresIn": 3600}
    )
    code = created.json()["accessCode"]

    clock.set_time(T0 + timedelta(hours=1))
    assert (await client.get(f"/api/public/{code}")).status_code == 200

    clock.tick(1)
    resp = await client.get(f"/api/public/{code}")
    assert resp.status_code == 410
    assert resp.json() == {"detail": "Access code has expired"}


async def test_blank_code(client):
    resp = await client.get("/api/public/%20%20")
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Access code is required"}
