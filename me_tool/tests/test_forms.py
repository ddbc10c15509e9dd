from datetime import date, timedelta

import pytest

from me_tool.models.enums import AgeGroup, Sex, Status
from me_tool.schemas import (
    LivelihoodCreate,
    ProjectCreate,
    StaffCreate,
    StrategicObjectiveCreate,
    TeamCreate,
    WorkshopCreate,
)
from me_tool.schemas.base import clean_form, decode_form

TODAY = date.today().isoformat()
TOMORROW = (date.today() + timedelta(days=1)).isoformat()


def objective_form(**overrides):
    form = {
        "name": "Improve literacy",
        "outcome": "Children read at grade level",
        "kpi": "Reading scores",
        "targetValue": "100",
        "actualValue": "40",
        "status": "ON_TRACK",
        "teamId": "1",
        "lastUpdated": TODAY,
    }
    form.update(overrides)
    return form


def paths(result):
    return [error.path for error in result.errors]


def messages(result):
    return {error.path: error.message for error in result.errors}


def test_clean_form_drops_blank_values():
    assert clean_form({"a": " x ", "b": "", "c": "   ", "d": None, "e": 3}) == {"a": "x", "e": 3}


def test_objective_decodes_typed_record():
    result = decode_form(StrategicObjectiveCreate, objective_form())
    assert result.ok
    record = result.record
    assert record.target_value == 100.0
    assert record.team_id == 1
    assert record.status is Status.ON_TRACK
    assert record.last_updated == date.today()


def test_objective_actual_equal_to_target_is_accepted():
    result = decode_form(StrategicObjectiveCreate, objective_form(targetValue="10", actualValue="10"))
    assert result.ok


def test_objective_actual_above_target_is_rejected():
    result = decode_form(StrategicObjectiveCreate, objective_form(targetValue="10", actualValue="11"))
    assert not result.ok
    assert messages(result) == {"actualValue": "Actual value cannot exceed target value"}


def test_objective_missing_fields_are_reported_in_order():
    result = decode_form(StrategicObjectiveCreate, {})
    assert paths(result) == [
        "name",
        "outcome",
        "kpi",
        "targetValue",
        "actualValue",
        "status",
        "teamId",
        "lastUpdated",
    ]
    assert messages(result)["name"] == "Name is required"
    assert messages(result)["kpi"] == "KPI is required"


def test_blank_field_counts_as_missing():
    result = decode_form(StrategicObjectiveCreate, objective_form(outcome="   "))
    assert messages(result) == {"outcome": "Outcome is required"}


def test_objective_field_rules():
    result = decode_form(
        StrategicObjectiveCreate,
        objective_form(
            name="x" * 101,
            targetValue="0",
            actualValue="-1",
            status="FINISHED",
            teamId="0",
            lastUpdated=TOMORROW,
        ),
    )
    found = messages(result)
    assert found["name"] == "Name must be 100 characters or less"
    assert found["targetValue"] == "Target value must be a positive number"
    assert found["actualValue"] == "Actual value must be non-negative"
    assert found["status"].startswith("Status must be one of")
    assert found["teamId"] == "Team ID must be a positive integer"
    assert found["lastUpdated"] == "Last updated date cannot be in the future"


def test_objective_non_numeric_values():
    result = decode_form(StrategicObjectiveCreate, objective_form(targetValue="lots", teamId="abc"))
    found = messages(result)
    assert found["targetValue"] == "Target value must be a number"
    assert found["teamId"] == "Team must be a whole number"


def test_objective_accepts_timestamp_and_rejects_garbage_dates():
    assert decode_form(StrategicObjectiveCreate, objective_form(lastUpdated="2024-03-01T10:00:00")).ok
    result = decode_form(StrategicObjectiveCreate, objective_form(lastUpdated="yesterday"))
    assert messages(result) == {"lastUpdated": "Invalid date format, expected YYYY-MM-DD"}


def project_form(**overrides):
    form = {
        "name": "Reading clubs",
        "objective": "Run weekly clubs",
        "strategicObjectiveId": "1",
        "outcome": "Clubs meet weekly",
        "activity": "Club sessions",
        "kpi": "Sessions held",
        "targetValue": "50",
        "actualValue": "10",
        "status": "AT_RISK",
        "teamId": "1",
        "timeline": "Q1-Q4",
        "lastUpdated": TODAY,
    }
    form.update(overrides)
    return form


def test_project_actual_may_exceed_target():
    result = decode_form(ProjectCreate, project_form(targetValue="10", actualValue="15"))
    assert result.ok
    assert result.record.progress_percentage == 150.0


def test_project_progress_ignores_submitted_value():
    result = decode_form(ProjectCreate, project_form(progressPercentage="99"))
    assert result.record.progress_percentage == pytest.approx(20.0)


def test_project_requires_strict_date_format():
    result = decode_form(ProjectCreate, project_form(lastUpdated="2024-03-01T10:00:00"))
    assert messages(result) == {"lastUpdated": "Date must be in YYYY-MM-DD format"}
    result = decode_form(ProjectCreate, project_form(lastUpdated=TOMORROW))
    assert messages(result) == {"lastUpdated": "Last updated date cannot be in the future"}


def test_project_field_messages():
    result = decode_form(
        ProjectCreate,
        project_form(strategicObjectiveId="none", teamId="x", status="LATE", targetValue="0", actualValue="-2"),
    )
    found = messages(result)
    assert found["strategicObjectiveId"] == "Please select a strategic objective"
    assert found["teamId"] == "Please select a team"
    assert found["status"] == "Please select a valid status"
    assert found["targetValue"] == "Target value must be positive"
    assert found["actualValue"] == "Actual value must be non-negative"


def test_project_missing_name_uses_label():
    form = project_form()
    del form["name"]
    assert messages(decode_form(ProjectCreate, form)) == {"name": "Project name is required"}


def workshop_form(**overrides):
    form = {
        "projectId": "1",
        "purpose": "Classroom training",
        "date": TODAY,
        "location": "Kisumu",
        "numParticipants": "25",
        "disaggregatedSex": "FEMALE",
        "ageGroup": "GROUP_30_44",
        "preEvaluation": "Low",
        "postEvaluation": "High",
        "localPartner": "County office",
        "localPartnerResponsibility": "Venue",
        "successOfPartnership": "Good",
        "challenges": "Rain",
        "strengths": "Turnout",
        "outcomes": "Skills",
        "recommendations": "Repeat",
    }
    form.update(overrides)
    return form


def test_workshop_disability_defaults_to_false():
    result = decode_form(WorkshopCreate, workshop_form())
    assert result.ok
    assert result.record.disability is False
    assert result.record.disaggregated_sex is Sex.FEMALE
    assert result.record.age_group is AgeGroup.GROUP_30_44


def test_workshop_checkbox_value():
    assert decode_form(WorkshopCreate, workshop_form(disability="true")).record.disability is True


def test_workshop_rules():
    result = decode_form(WorkshopCreate, workshop_form(date=TOMORROW, numParticipants="-1", projectId="0"))
    found = messages(result)
    assert found["date"] == "Workshop date cannot be in the future"
    assert found["numParticipants"] == "Number of participants must be non-negative"
    assert found["projectId"] == "Project ID must be a positive integer"


def test_livelihood_grant_rules():
    form = {
        "projectId": "1",
        "participantName": "Jane",
        "location": "Gulu",
        "disaggregatedSex": "FEMALE",
        "ageGroup": "GROUP_30_44",
        "grantAmountReceived": "0",
        "grantPurpose": "Poultry",
        "progress1": "Bought chicks",
        "progress2": "Selling eggs",
        "outcome": "Income",
        "subsequentGrantAmount": "-5",
    }
    found = messages(decode_form(LivelihoodCreate, form))
    assert found["grantAmountReceived"] == "Grant amount must be positive"
    assert found["subsequentGrantAmount"] == "Subsequent grant amount must be non-negative"


def test_team_name_rules():
    assert messages(decode_form(TeamCreate, {"name": ""})) == {"name": "Team name is required"}
    assert messages(decode_form(TeamCreate, {"name": "x" * 101})) == {
        "name": "Team name must be 100 characters or less"
    }
    assert decode_form(TeamCreate, {"name": " Ops "}).record.name == "Ops"


def test_staff_rules():
    result = decode_form(
        StaffCreate,
        {"name": "Sam", "email": "not-an-email", "role": "OWNER", "password": "short"},
    )
    found = messages(result)
    assert found["email"] == "Invalid email address"
    assert found["role"] == "Role must be STAFF or ADMIN"
    assert found["password"] == "Password must be at least 8 characters"


@pytest.mark.parametrize("value", ["inf", "-inf", "nan", "Infinity"])
def test_objective_rejects_non_finite_numbers(value):
    found = messages(decode_form(StrategicObjectiveCreate, objective_form(targetValue=value, actualValue=value)))
    assert found["targetValue"] == "Target value must be a number"
    assert found["actualValue"] == "Actual value must be a number"


@pytest.mark.parametrize("value", ["inf", "nan"])
def test_project_rejects_non_finite_numbers(value):
    found = messages(decode_form(ProjectCreate, project_form(targetValue=value, actualValue=value)))
    assert found["targetValue"] == "Target value must be a number"
    assert found["actualValue"] == "Actual value must be a number"


@pytest.mark.parametrize("value", ["inf", "nan"])
def test_livelihood_rejects_non_finite_amounts(value):
    form = {
        "projectId": "1",
        "participantName": "Jane",
        "location": "Gulu",
        "disaggregatedSex": "FEMALE",
        "ageGroup": "GROUP_30_44",
        "grantAmountReceived": value,
        "grantPurpose": "Poultry",
        "progress1": "Bought chicks",
        "progress2": "Selling eggs",
        "outcome": "Income",
        "subsequentGrantAmount": value,
    }
    found = messages(decode_form(LivelihoodCreate, form))
    assert found["grantAmountReceived"] == "Grant amount must be a number"
    assert found["subsequentGrantAmount"] == "Subsequent grant amount must be a number"
