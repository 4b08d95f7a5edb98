"""Shared fixtures: an in-memory MongoDB and an HTTP client bound to the app."""

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from learning_resources.db import client as db_client
from learning_resources.db.seed import SAMPLE_RESOURCES
from learning_resources.main import app
from learning_resources.services.resources_service import seed_if_empty


@pytest.fixture
def mongo_db(monkeypatch):
    """Replace the global MongoDB database with a fresh in-memory one."""
    database = AsyncMongoMockClient()["learning_resources_test"]
    monkeypatch.setattr(db_client, "_db", database)
    return database


@pytest.fixture
async def seeded_db(mongo_db):
    """In-memory database holding the twelve sample resources."""
    await seed_if_empty(SAMPLE_RESOURCES)
    return mongo_db


@pytest.fixture
async def client(mongo_db):
    """HTTP client for the API, backed by an empty in-memory database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
async def seeded_client(seeded_db):
    """HTTP client for the API, backed by the seeded in-memory database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def resource_draft():
    return {
        "title": "Compiler Construction",
        "author": "Prof. Ada Turing",
        "type": "lecture-notes",
        "description": "Lexing, parsing, semantic analysis and code generation.",
        "fileName": "compilers.pdf",
        "fileSize": "1.1 MB",
    }
