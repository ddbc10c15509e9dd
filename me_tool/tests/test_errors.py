import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from me_tool.crud.strategic import CRUDStrategicObjective
from me_tool.models import Team
from me_tool.tests.conftest import HTML, count, make_client


@pytest.fixture
def failing_commit(monkeypatch):
    def commit(self):
        raise OperationalError("INSERT INTO teams", {}, Exception("database is locked"))

    monkeypatch.setattr(Session, "commit", commit)
    return monkeypatch


def test_store_failure_is_reported_as_500(admin_client, db, failing_commit):
    response = admin_client.post("/team", data={"name": "Ops"})
    failing_commit.undo()
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "database is locked" in body["error"]
    assert count(db, Team) == 0


def test_store_failure_page_for_browsers(admin_client, failing_commit):
    response = admin_client.post("/team", data={"name": "Ops"}, headers=HTML)
    failing_commit.undo()
    assert response.status_code == 500
    assert "Something went wrong" in response.text


def test_unexpected_error_message(app, admin, monkeypatch):
    def explode(self, db):
        raise RuntimeError("boom")

    monkeypatch.setattr(CRUDStrategicObjective, "list_with_team", explode)
    client = make_client(app, admin, raise_server_exceptions=False)
    response = client.get("/strategy")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "boom"}


def test_unexpected_error_without_message(app, admin, monkeypatch):
    def explode(self, db):
        raise RuntimeError()

    monkeypatch.setattr(CRUDStrategicObjective, "list_with_team", explode)
    client = make_client(app, admin, raise_server_exceptions=False)
    response = client.get("/strategy")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "An unexpected error occurred"}
