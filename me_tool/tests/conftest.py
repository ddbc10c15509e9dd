from datetime import date, timedelta
from typing import Iterator, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from me_tool.core.config import Settings
from me_tool.core.security import get_password_hash
from me_tool.main import create_app
from me_tool.models import Project, Role, Staff, Status, StrategicObjective, Team

ADMIN_PASSWORD = "admin-password"
STAFF_PASSWORD = "staff-password"

HTML = {"Accept": "text/html"}


@pytest.fixture(scope="session")
def password_hashes() -> dict:
    """Hashing is slow; hash each fixture password once per run."""
    return {
        ADMIN_PASSWORD: get_password_hash(ADMIN_PASSWORD),
        STAFF_PASSWORD: get_password_hash(STAFF_PASSWORD),
    }


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        NODE_ENV="test",
        SESSION_SECRET="test-session-secret",
        DATABASE_URL=f"sqlite:///{tmp_path / 'me_tool.db'}",
        LOG_LEVEL="WARNING",
        INITIAL_ADMIN_EMAIL=None,
        INITIAL_ADMIN_PASSWORD=None,
    )


@pytest.fixture
def app(settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def db(app) -> Iterator[Session]:
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def make_client(app: FastAPI, user: Optional[Staff] = None, **kwargs) -> TestClient:
    """Test client, signed in as ``user`` when one is given."""
    cookies = {}
    if user is not None:
        codec = app.state.session_codec
        cookies[codec.cookie_name] = codec.encode(user.id)
    return TestClient(app, cookies=cookies, **kwargs)


def add_staff(db: Session, *, name: str, email: str, role: Role, password_hash: str) -> Staff:
    staff = Staff(name=name, email=email, role=role, password=password_hash)
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


@pytest.fixture
def admin(db, password_hashes) -> Staff:
    return add_staff(
        db,
        name="Admin User",
        email="admin@example.org",
        role=Role.ADMIN,
        password_hash=password_hashes[ADMIN_PASSWORD],
    )


@pytest.fixture
def staff_member(db, password_hashes) -> Staff:
    return add_staff(
        db,
        name="Field Officer",
        email="officer@example.org",
        role=Role.STAFF,
        password_hash=password_hashes[STAFF_PASSWORD],
    )


@pytest.fixture
def client(app) -> TestClient:
    return make_client(app)


@pytest.fixture
def admin_client(app, admin) -> TestClient:
    return make_client(app, admin)


@pytest.fixture
def staff_client(app, staff_member) -> TestClient:
    return make_client(app, staff_member)


@pytest.fixture
def team(db, admin) -> Team:
    team = Team(name="Programmes", created_by_id=admin.id)
    db.add(team)
    db.commit()
    db.refresh(team)
    return team


@pytest.fixture
def objective(db, team) -> StrategicObjective:
    objective = StrategicObjective(
        name="Improve livelihoods",
        outcome="Households earn more",
        kpi="Households supported",
        target_value=200,
        actual_value=50,
        status=Status.ON_TRACK,
        team_id=team.id,
        last_updated=date.today() - timedelta(days=3),
    )
    db.add(objective)
    db.commit()
    db.refresh(objective)
    return objective


@pytest.fixture
def project(db, objective, team) -> Project:
    project = Project(
        project_name="Village savings groups",
        objective="Set up savings groups",
        strategic_objective_id=objective.id,
        outcome="Groups meet monthly",
        activity="Training sessions",
        kpi="Groups formed",
        target_value=20,
        actual_value=5,
        progress_percentage=25.0,
        status=Status.ON_TRACK,
        team_id=team.id,
        timeline="2026",
        last_updated=date.today(),
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def count(db: Session, model) -> int:
    db.expire_all()
    return db.query(model).count()
