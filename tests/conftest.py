"""Pytest configuration and fixtures."""

import os

import mongomock
import pytest
from fastapi.testclient import TestClient
from mongoengine import connect, disconnect
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from namcol import models  # noqa: F401
from namcol.api.dependencies import get_password_reset_notifier
from namcol.database import Base, engine_options, get_db
from namcol.main import app
from namcol.models.recipe import Recipe, RecipeIngredient

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    _url = make_url(os.environ["DATABASE_URL"])
    SQLALCHEMY_DATABASE_URL = _url.set(database=f"{_url.database}_test").render_as_string(
        hide_password=False
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="session", autouse=True)
def setup_document_store():
    """Point the default mongoengine connection at an in-memory mongomock client."""
    disconnect()
    connect("namcol_test", host="mongodb://localhost", mongo_client_class=mongomock.MongoClient)
    yield
    disconnect()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()
    Recipe.objects.delete()


@pytest.fixture
def sent_emails():
    """(email, token) pairs handed to the password reset notifier."""
    return []


@pytest.fixture(scope="function")
def client(db, sent_emails):
    """Create a test client with database and notifier overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def override_notifier():
        return lambda email, token: sent_emails.append((email, token))

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_reset_notifier] = override_notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a user and return the public user payload."""
    response = client.post(
        "/register",
        json={
            "name": "Test User",
            "email": "test@example.com",
            "password": "testpass123",
            "country": "Colombia",
        },
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def make_recipe():
    """Factory that saves a recipe document and returns it."""

    def _make_recipe(title="Arepas", ingredients=(("flour", "2 cups"), ("salt", "1 tsp"))):
        recipe = Recipe(
            title=title,
            description=f"{title} description",
            image_url=f"https://img.example.com/{title.lower()}.jpg",
            steps=["Mix", "Cook"],
            ingredients=[RecipeIngredient(name=name, quantity=qty) for name, qty in ingredients],
        )
        recipe.save()
        return recipe

    return _make_recipe


@pytest.fixture
def recipe(make_recipe):
    """A recipe with two ingredients: flour and salt."""
    return make_recipe()
