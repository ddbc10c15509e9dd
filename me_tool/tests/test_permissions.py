from fastapi import Depends

from me_tool.core.permissions import RequestGuard, is_admin
from me_tool.models.enums import Role
from me_tool.schemas.staff import SafeStaff
from me_tool.tests.conftest import make_client


def add_staff_only_route(app):
    @app.get("/staff-only")
    def staff_only(user: SafeStaff = Depends(RequestGuard(Role.STAFF))):
        return {"id": user.id}


def test_role_guard_admits_matching_role(app, staff_member):
    add_staff_only_route(app)
    response = make_client(app, staff_member).get("/staff-only")
    assert response.status_code == 200
    assert response.json() == {"id": staff_member.id}


def test_role_guard_is_exact(app, admin):
    add_staff_only_route(app)
    response = make_client(app, admin).get("/staff-only")
    assert response.status_code == 403


def test_is_admin():
    assert not is_admin(None)
    assert is_admin(SafeStaff(id="a", name="A", email="a@example.org", role=Role.ADMIN))
    assert not is_admin(SafeStaff(id="s", name="S", email="s@example.org", role=Role.STAFF))
