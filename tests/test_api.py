"""Tests for the REST API."""

import pytest

from learning_resources.services import resources_service


# =============================================================================
# Health
# =============================================================================


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# =============================================================================
# Listing and search
# =============================================================================


@pytest.mark.asyncio
async def test_list_all_resources(seeded_client):
    response = await seeded_client.get("/api/resources")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 12
    assert set(data[0]) == {
        "id", "title", "author", "type", "description", "fileName", "fileSize",
        "fileUrl", "downloadCount", "tags", "createdAt",
    }


@pytest.mark.asyncio
async def test_list_resources_of_one_type(seeded_client):
    response = await seeded_client.get("/api/resources", params={"type": "multimedia"})

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 3
    assert {r["type"] for r in data} == {"multimedia"}


@pytest.mark.asyncio
async def test_search_with_sort(seeded_client):
    response = await seeded_client.get(
        "/api/resources", params={"q": "machine learning", "type": "all", "sortBy": "downloads"}
    )

    assert response.status_code == 200
    assert [r["downloadCount"] for r in response.json()] == [4521, 432]


@pytest.mark.asyncio
async def test_sort_only_goes_through_search(seeded_client):
    response = await seeded_client.get("/api/resources", params={"sortBy": "title", "type": "ebook"})

    assert response.status_code == 200
    assert [r["title"] for r in response.json()] == [
        "Advanced Mathematics for Engineers",
        "Artificial Intelligence: A Modern Approach",
        "Introduction to Computer Science",
    ]


@pytest.mark.asyncio
async def test_list_empty_store(client):
    response = await client.get("/api/resources")

    assert response.status_code == 200
    assert response.json() == []


# =============================================================================
# Single resource
# =============================================================================


@pytest.mark.asyncio
async def test_get_resource_by_id(seeded_client):
    listed = (await seeded_client.get("/api/resources")).json()

    response = await seeded_client.get(f"/api/resources/{listed[0]['id']}")

    assert response.status_code == 200
    assert response.json() == listed[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("resource_id", ["665f1c2e9b1e8a3d4c5b6a79", "missing"])
async def test_get_resource_not_found(seeded_client, resource_id):
    response = await seeded_client.get(f"/api/resources/{resource_id}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Resource not found"


# =============================================================================
# Upload
# =============================================================================


@pytest.mark.asyncio
async def test_create_resource(client, resource_draft):
    response = await client.post("/api/resources", json=resource_draft)

    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["downloadCount"] == 0
    assert data["type"] == "lecture-notes"
    assert data["fileName"] == "compilers.pdf"
    assert data["createdAt"]

    fetched = await client.get(f"/api/resources/{data['id']}")
    assert fetched.json()["title"] == "Compiler Construction"


@pytest.mark.asyncio
async def test_create_resource_ignores_server_owned_fields(client, resource_draft):
    payload = dict(resource_draft, downloadCount=999, createdAt="2001-01-01T00:00:00Z", id="mine")

    response = await client.post("/api/resources", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["downloadCount"] == 0
    assert data["id"] != "mine"
    assert not data["createdAt"].startswith("2001")


@pytest.mark.asyncio
async def test_create_resource_trims_whitespace(client, resource_draft):
    payload = dict(resource_draft, title="   Compiler Construction   ")

    response = await client.post("/api/resources", json=payload)

    assert response.status_code == 201
    assert response.json()["title"] == "Compiler Construction"


@pytest.mark.asyncio
async def test_create_resource_with_invalid_type_is_rejected(seeded_client, resource_draft):
    response = await seeded_client.post("/api/resources", json=dict(resource_draft, type="video"))

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid resource data"
    assert "type" in body["errors"]
    assert await resources_service.count_resources() == 12


@pytest.mark.asyncio
async def test_create_resource_reports_each_invalid_field(client):
    response = await client.post("/api/resources", json={"title": "AI", "type": "ebook", "description": "short"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert set(errors) == {"title", "author", "description"}
    assert all(isinstance(messages, list) and messages for messages in errors.values())
    assert await resources_service.count_resources() == 0


@pytest.mark.asyncio
async def test_create_resource_rejects_blank_required_field(client, resource_draft):
    response = await client.post("/api/resources", json=dict(resource_draft, author="    "))

    assert response.status_code == 400
    assert "author" in response.json()["errors"]


# =============================================================================
# Download counter
# =============================================================================


@pytest.mark.asyncio
async def test_download_increments_counter(seeded_client):
    resource = (await seeded_client.get("/api/resources", params={"q": "quantum"})).json()[0]

    response = await seeded_client.post(f"/api/resources/{resource['id']}/download")

    assert response.status_code == 200
    assert response.json() == {"message": "Download count incremented", "downloadCount": 679}
    fetched = (await seeded_client.get(f"/api/resources/{resource['id']}")).json()
    assert fetched["downloadCount"] == 679


@pytest.mark.asyncio
async def test_download_unknown_resource_is_not_found(seeded_client):
    response = await seeded_client.post("/api/resources/665f1c2e9b1e8a3d4c5b6a79/download")

    assert response.status_code == 404
    assert await resources_service.count_resources() == 12


# =============================================================================
# Categories
# =============================================================================


@pytest.mark.asyncio
async def test_list_categories(seeded_client):
    response = await seeded_client.get("/api/categories")

    assert response.status_code == 200
    assert response.json() == [
        {"type": "all", "label": "All Resources", "count": 12},
        {"type": "ebook", "label": "E-books", "count": 3},
        {"type": "lecture-notes", "label": "Lecture Notes", "count": 3},
        {"type": "research-paper", "label": "Research Papers", "count": 3},
        {"type": "multimedia", "label": "Multimedia", "count": 3},
    ]


# =============================================================================
# Storage failures
# =============================================================================


@pytest.mark.asyncio
async def test_storage_failure_is_reported_as_500(client, monkeypatch):
    from pymongo.errors import ServerSelectionTimeoutError

    from learning_resources.routes import resources_routes

    async def unreachable():
        raise ServerSelectionTimeoutError("no servers available")

    monkeypatch.setattr(resources_routes, "get_all_resources", unreachable)

    response = await client.get("/api/resources")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch resources"}


# =============================================================================
# Startup
# =============================================================================


@pytest.mark.asyncio
async def test_startup_survives_unreachable_database(monkeypatch, caplog):
    from pymongo.errors import ServerSelectionTimeoutError

    from learning_resources import main
    from learning_resources.config import Settings

    async def connect():
        pass

    async def unreachable():
        raise ServerSelectionTimeoutError("no servers available")

    closed = []
    monkeypatch.setattr(main, "settings", Settings(seed_on_startup=True))
    monkeypatch.setattr(main, "init_mongo", connect)
    monkeypatch.setattr(main, "close_mongo", lambda: closed.append(True))
    monkeypatch.setattr(resources_service, "count_resources", unreachable)

    started = False
    async with main.lifespan(main.app):
        started = True

    assert started
    assert closed == [True]
    assert "Seeding skipped" in caplog.text
