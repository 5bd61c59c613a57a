"""Shared pytest fixtures for thumbnail generator tests."""

import asyncio
import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Settings are read once, so the environment must be in place before ``app`` is imported.
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="thumbnail-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["STAGING_PATH"] = str(_TEST_ROOT / "staging")
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["CLOUDINARY_CLOUD_NAME"] = "demo"
os.environ["CLOUDINARY_API_KEY"] = "123"
os.environ["CLOUDINARY_API_SECRET"] = "secret"

from fastapi.testclient import TestClient  # noqa: E402

from app.auth.security import hash_password  # noqa: E402
from app.crud import user as crud_user  # noqa: E402
from app.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.services.thumbnails import ThumbnailGenerator, get_thumbnail_generator  # noqa: E402

FAKE_IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"
FAKE_IMAGE_URL = "https://res.cloudinary.com/demo/image/upload/v1/thumbnails/fake.png"


class FakeImageService:
    """Stands in for GeminiImageService and records every call."""

    def __init__(self, image_bytes: bytes = FAKE_IMAGE_BYTES, error: Exception | None = None):
        self.image_bytes = image_bytes
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate_image(self, prompt, aspect_ratio="16:9"):
        self.calls.append((prompt, str(getattr(aspect_ratio, "value", aspect_ratio))))
        if self.error is not None:
            raise self.error
        return self.image_bytes


class FakeStorage:
    """Stands in for CloudinaryStorage and records uploaded payloads."""

    def __init__(self, url: str = FAKE_IMAGE_URL, error: Exception | None = None):
        self.url = url
        self.error = error
        self.uploads: list[bytes] = []

    async def upload(self, image_bytes):
        self.uploads.append(image_bytes)
        if self.error is not None:
            raise self.error
        return self.url


async def _reset_database() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_TEST_ROOT, ignore_errors=True)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
async def db():
    """Fresh tables and an open AsyncSession."""
    await _reset_database()
    async with SessionLocal() as session:
        yield session


@pytest.fixture
def make_user(db):
    """Factory creating users directly in the database."""

    async def _make_user(email: str, name: str = "Test User", password: str = "secret123"):
        return await crud_user.create_user(
            db, name=name, email=email, password_hash=hash_password(password)
        )

    return _make_user


@pytest.fixture
def fake_image_service() -> FakeImageService:
    return FakeImageService()


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def generator(fake_image_service, fake_storage) -> ThumbnailGenerator:
    """A real ThumbnailGenerator wired to fake external services."""
    return ThumbnailGenerator(fake_image_service, fake_storage)


@pytest.fixture
def client(generator) -> Generator[TestClient, None, None]:
    """TestClient on a clean database with external services faked."""
    asyncio.run(_reset_database())
    app.dependency_overrides[get_thumbnail_generator] = lambda: generator
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
