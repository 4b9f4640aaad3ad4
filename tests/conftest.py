"""Shared fixtures: an API client backed by a throwaway SQLite database."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from app.main import create_app
from app.security import create_access_token


def _build_client(tmp_path, seed):
    db_file = tmp_path / "eresult.db"
    app = create_app(database_url=f"sqlite+aiosqlite:///{db_file}", migrate=True, seed=seed)
    return TestClient(app)


@pytest.fixture
def client(tmp_path):
    """Client with an empty schema."""
    with _build_client(tmp_path, seed=False) as c:
        yield c


@pytest.fixture
def seeded_client(tmp_path):
    """Client with the default admin, school info and 30 class arms."""
    with _build_client(tmp_path, seed=True) as c:
        yield c


def _auth_headers(role):
    token = create_access_token({"sub": "1", "username": f"{role}@test", "name": role.title(), "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return _auth_headers("admin")


@pytest.fixture
def form_master_headers():
    return _auth_headers("form_master")


@pytest.fixture
def count_rows():
    """Count rows of a model straight from the app's database."""

    def _count(client, model, **filters):
        async def _query():
            async with client.app.state.sessionmaker() as session:
                stmt = select(func.count()).select_from(model)
                for column, value in filters.items():
                    stmt = stmt.where(getattr(model, column) == value)
                return (await session.execute(stmt)).scalar()

        return client.portal.call(_query)

    return _count


@pytest.fixture
def student_payload():
    """Factory for a POST /api/students body."""

    def _make(**overrides):
        payload = {
            "studentName": "Aondona Terver",
            "admNo": "DPC/001",
            "dob": "2012-04-09",
            "age": 12,
            "sex": "Male",
            "term": "1",
            "className": "JSS1A",
            "subjects": [
                {"name": "Mathematics", "ca1": 8, "ca2": 9, "ca3": 7, "exam": 60, "total": 84, "grade": "A", "remark": "Excellent"},
                {"name": "English Language", "ca1": 6, "ca2": 7, "ca3": 8, "exam": 45, "total": 66, "grade": "B", "remark": "Very Good"},
            ],
            "affective": {"Punctuality": 5, "Neatness": 4},
            "psychomotor": {"Handwriting": 3},
            "totalObtained": 150,
            "totalObtainable": 200,
            "averageScore": 75,
            "formMaster": "Mrs. Iorfa",
            "formMasterComment": "A good result",
        }
        payload.update(overrides)
        return payload

    return _make
