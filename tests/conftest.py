"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Companies, jobs and users to test against
- Admin / regular user auth headers
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models.company import Company
from app.models.job import Job
from app.models.user import User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def companies(db_session):
    """Two companies: c1 and c2"""
    c1 = Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img")
    c2 = Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img")
    db_session.add_all([c1, c2])
    db_session.commit()
    return [c1, c2]


@pytest.fixture
def jobs(db_session, companies):
    """
    Three jobs:
    - Engineer (c1): salary 100000, equity 0.1
    - Designer (c1): salary 50000, equity 0
    - Senior Engineer (c2): salary 150000, no equity
    """
    j1 = Job(title="Engineer", salary=100000, equity=Decimal("0.1"), company_handle="c1")
    j2 = Job(title="Designer", salary=50000, equity=Decimal("0"), company_handle="c1")
    j3 = Job(title="Senior Engineer", salary=150000, equity=None, company_handle="c2")
    db_session.add_all([j1, j2, j3])
    db_session.commit()
    return {"engineer": j1.id, "designer": j2.id, "senior": j3.id}


def make_user(db_session, username, password, is_admin=False):
    user = User(
        username=username,
        hashed_password=get_password_hash(password),
        first_name="First",
        last_name="Last",
        email=f"{username}@example.com",
        is_admin=is_admin,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def admin_user(db_session):
    return make_user(db_session, "admin", "adminpass", is_admin=True)


@pytest.fixture
def regular_user(db_session):
    return make_user(db_session, "u1", "password1")


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(data={"sub": admin_user.username, "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(regular_user):
    token = create_access_token(data={"sub": regular_user.username, "is_admin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_job_data():
    """Valid POST /jobs body"""
    return {
        "title": "New Job",
        "salary": 80000,
        "equity": "0.2",
        "companyHandle": "c1",
    }
