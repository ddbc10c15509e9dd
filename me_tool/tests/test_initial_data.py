from me_tool.core.initial_data import seed_initial_admin
from me_tool.main import create_app
from me_tool.models import Role, Staff


def test_seeds_admin_once(settings):
    settings = settings.model_copy(
        update={"INITIAL_ADMIN_EMAIL": "root@example.org", "INITIAL_ADMIN_PASSWORD": "first-password"}
    )
    app = create_app(settings)
    assert seed_initial_admin(app.state.session_factory, settings) is None

    db = app.state.session_factory()
    try:
        [admin] = db.query(Staff).all()
        assert admin.email == "root@example.org"
        assert admin.role == Role.ADMIN
        assert admin.name == "Admin User"
        assert admin.verify_password("first-password")
    finally:
        db.close()


def test_skipped_without_credentials(app, db):
    assert db.query(Staff).count() == 0
