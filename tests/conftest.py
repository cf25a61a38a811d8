# FILE: tests/conftest.py
"""
Pytest configuration for SpecForge test suite.

Provides:
- db_session: in-memory SQLite session with all tables created
- sample_response / generated_spec: raw and validated model response
- fake_generator: Mock standing in for SpecGenerationClient
- client: TestClient over the routers with DB and generator overridden
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import copy

import pytest
from unittest.mock import Mock
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from specforge.db import Base, get_db
from specforge.error_handlers import register_error_handlers
from specforge.llm.generator import SpecGenerationClient, get_generation_client
from specforge.llm.schemas import GeneratedSpec
from specforge.routers.status import router as status_router
from specforge.specs import models  # noqa: F401  (registers tables)
from specforge.specs.router import router as specs_router


SAMPLE_RESPONSE = {
    "user_stories": [
        {
            "title": "Auth",
            "description": "Users can sign in",
            "tasks": [
                {"title": "Login form", "description": "Email and password form", "group": "Frontend"},
                {"title": "Login API", "description": "POST /login endpoint", "group": "Backend"},
                {"title": "Session cookie", "description": "Persist the session", "group": "Backend"},
            ],
        },
        {
            "title": "Dashboard",
            "description": "Users see their projects",
            "tasks": [
                {"title": "Project list", "description": "Render projects", "group": "Frontend"},
            ],
        },
        {
            "title": "Audit log",
            "description": "Admins can review activity",
            "tasks": [],
        },
    ],
    "risks": ["Users may forget passwords", "Scope creep"],
}


@pytest.fixture
def db_session():
    """In-memory database shared across threads (TestClient runs handlers in a threadpool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def sample_response():
    """Raw model response (fresh copy per test)."""
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture
def generated_spec(sample_response):
    return GeneratedSpec.model_validate(sample_response)


@pytest.fixture
def fake_generator(generated_spec):
    generator = Mock(spec=SpecGenerationClient)
    generator.generate_spec.return_value = generated_spec
    generator.health_check.return_value = True
    return generator


@pytest.fixture
def app(db_session, fake_generator):
    """Bare FastAPI app with the SpecForge routers and error handlers."""
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(specs_router)
    app.include_router(status_router)

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_generation_client] = lambda: fake_generator
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
