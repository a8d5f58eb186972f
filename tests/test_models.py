from __future__ import annotations

import datetime

import pydantic
import pytest

from canvasr.models import (
    BlueprintRestrictionsByObjectType,
    Course,
    DefaultView,
    Term,
    WorkflowState,
)

COURSE_PAYLOAD = {
    "id": 370663,
    "uuid": "WvAHhY5FINzq5IyRIJybGeiXyFkG3SqHUPb7jZY5",
    "name": "InstructureCon 2012",
    "course_code": "INSTCON12",
    "workflow_state": "available",
    "account_id": 81259,
    "root_account_id": 81259,
    "enrollment_term_id": 34,
    "start_at": "2012-06-01T00:00:00-06:00",
    "end_at": "2012-09-01T00:00:00-06:00",
    "default_view": "feed",
    "is_public": True,
    "term": {
        "id": 1,
        "name": "Default Term",
        "start_at": "2012-06-01T00:00:00-06:00",
        "end_at": None,
    },
    "course_progress": {
        "requirement_count": 10,
        "requirement_completed_count": 1,
        "next_requirement_url": "https://canvas.example.edu/courses/1/modules/items/2",
        "completed_at": None,
    },
    "permissions": {"create_discussion_topic": True, "create_announcement": False},
    "blueprint_restrictions_by_object_type": {
        "assignment": {"content": True, "points": True},
        "wiki_page": {"content": True},
    },
    "sis_course_id": None,
    "enrollments": [{"type": "student", "role": "StudentEnrollment"}],
}


def test_full_course() -> None:
    course = Course.model_validate(COURSE_PAYLOAD)

    assert course.id == 370663
    assert course.workflow_state is WorkflowState.AVAILABLE
    assert course.default_view is DefaultView.FEED
    assert course.start_at == datetime.datetime(
        2012, 6, 1, tzinfo=datetime.timezone(datetime.timedelta(hours=-6))
    )
    assert course.term is not None
    assert course.term.name == "Default Term"
    assert course.term.end_at is None
    assert course.course_progress is not None
    assert course.course_progress.requirement_count == 10
    assert course.permissions is not None
    assert course.permissions.create_discussion_topic is True
    restrictions = course.blueprint_restrictions_by_object_type
    assert isinstance(restrictions, BlueprintRestrictionsByObjectType)
    assert restrictions.wiki_page.content is True
    assert course.enrollments == [{"type": "student", "role": "StudentEnrollment"}]


def test_minimal_course() -> None:
    course = Course.model_validate({"id": 1})

    assert course.id == 1
    assert course.name is None
    assert course.term is None
    assert course.workflow_state is None


def test_unknown_fields_ignored() -> None:
    course = Course.model_validate({"id": 1, "homeroom_course": False, "friendly_name": "x"})
    assert not hasattr(course, "homeroom_course")


def test_id_required() -> None:
    with pytest.raises(pydantic.ValidationError):
        Course.model_validate({"name": "No id"})


def test_unknown_workflow_state_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        Course.model_validate({"id": 1, "workflow_state": "archived"})


def test_term_requires_name() -> None:
    with pytest.raises(pydantic.ValidationError):
        Term.model_validate({"id": 1})


def test_models_are_frozen() -> None:
    course = Course.model_validate({"id": 1})
    with pytest.raises(pydantic.ValidationError):
        course.name = "renamed"  # type: ignore[misc]
