from datetime import date

from me_tool.models import Project
from me_tool.tests.conftest import HTML, count


def project_form(objective, team, **overrides):
    form = {
        "name": "Reading clubs",
        "objective": "Run weekly clubs",
        "strategicObjectiveId": str(objective.id),
        "outcome": "Clubs meet weekly",
        "activity": "Club sessions",
        "kpi": "Sessions held",
        "targetValue": "40",
        "actualValue": "10",
        "status": "ON_TRACK",
        "teamId": str(team.id),
        "timeline": "Jan-Dec",
        "lastUpdated": date.today().isoformat(),
    }
    form.update(overrides)
    return form


def test_list_projects(staff_client, project, objective, team):
    response = staff_client.get("/project")
    assert response.status_code == 200
    data = response.json()["data"]
    [listed] = data["projects"]
    assert listed["projectName"] == "Village savings groups"
    assert listed["progressPercentage"] == 25.0
    assert listed["strategicObjective"] == {"id": objective.id, "name": "Improve livelihoods"}
    assert listed["responsibleTeam"]["name"] == "Programmes"
    assert data["strategicObjectives"] == [{"id": objective.id, "name": "Improve livelihoods"}]


def test_page_renders(staff_client, project):
    response = staff_client.get("/project", headers=HTML)
    assert response.status_code == 200
    assert "Village savings groups" in response.text
    assert "25.00%" in response.text


def test_progress_is_computed_not_submitted(admin_client, db, objective, team):
    response = admin_client.post(
        "/project", data=project_form(objective, team, progressPercentage="99")
    )
    assert response.status_code == 201
    assert response.json()["data"]["progressPercentage"] == 25.0
    db.expire_all()
    stored = db.query(Project).one()
    assert stored.project_name == "Reading clubs"
    assert stored.progress_percentage == 25.0


def test_actual_may_exceed_target(admin_client, db, objective, team):
    response = admin_client.post(
        "/project", data=project_form(objective, team, targetValue="10", actualValue="15")
    )
    assert response.status_code == 201
    assert response.json()["data"]["progressPercentage"] == 150.0


def test_strict_date_format(admin_client, db, objective, team):
    response = admin_client.post(
        "/project", data=project_form(objective, team, lastUpdated="01/02/2024")
    )
    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"path": "lastUpdated", "message": "Date must be in YYYY-MM-DD format"}
    ]
    assert count(db, Project) == 0


def test_unknown_strategic_objective(admin_client, db, objective, team):
    response = admin_client.post(
        "/project", data=project_form(objective, team, strategicObjectiveId=str(objective.id + 50))
    )
    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"path": "strategicObjectiveId", "message": "Selected strategic objective does not exist"}
    ]


def test_validation_errors_render_for_browsers(admin_client, objective, team):
    response = admin_client.post(
        "/project", data=project_form(objective, team, targetValue="0"), headers=HTML
    )
    assert response.status_code == 400
    assert "Target value must be positive" in response.text


def test_staff_cannot_create(staff_client, db, objective, team):
    response = staff_client.post("/project", data=project_form(objective, team))
    assert response.status_code == 403
    assert count(db, Project) == 0
