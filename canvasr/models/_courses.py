from __future__ import annotations

import enum
import typing
from datetime import datetime
from typing import Optional

from ._base import CanvasModel


class WorkflowState(str, enum.Enum):
    UNPUBLISHED = "unpublished"
    AVAILABLE = "available"
    COMPLETED = "completed"
    DELETED = "deleted"


class DefaultView(str, enum.Enum):
    FEED = "feed"
    WIKI = "wiki"
    MODULES = "modules"
    ASSIGNMENTS = "assignments"
    SYLLABUS = "syllabus"


class Term(CanvasModel):
    id: int
    name: str
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None


class CourseProgress(CanvasModel):
    requirement_count: Optional[int] = None
    requirement_completed_count: Optional[int] = None
    next_requirement_url: Optional[str] = None
    completed_at: Optional[datetime] = None


class Permissions(CanvasModel):
    create_discussion_topic: bool = False
    create_announcement: bool = False


class BlueprintRestrictions(CanvasModel):
    content: bool = False
    points: bool = False
    due_dates: bool = False
    availability_dates: bool = False


class AssignmentRestrictions(CanvasModel):
    content: bool = False
    points: bool = False


class WikiPageRestrictions(CanvasModel):
    content: bool = False


class BlueprintRestrictionsByObjectType(CanvasModel):
    assignment: AssignmentRestrictions = AssignmentRestrictions()
    wiki_page: WikiPageRestrictions = WikiPageRestrictions()


class Course(CanvasModel):
    """A course as returned by ``GET /api/v1/courses``.

    Only ``id`` is guaranteed. Canvas omits most fields depending on the
    caller's role and the ``include[]`` parameters sent.
    """

    id: int
    uuid: Optional[str] = None
    name: Optional[str] = None
    course_code: Optional[str] = None
    original_name: Optional[str] = None
    workflow_state: Optional[WorkflowState] = None

    sis_course_id: Optional[typing.Any] = None
    integration_id: Optional[typing.Any] = None
    sis_import_id: Optional[int] = None
    account_id: Optional[int] = None
    root_account_id: Optional[int] = None
    enrollment_term_id: Optional[int] = None
    grading_periods: Optional[typing.Any] = None
    grading_standard_id: Optional[int] = None
    grade_passback_setting: Optional[str] = None

    created_at: Optional[datetime] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None

    enrollments: Optional[typing.Any] = None
    total_students: Optional[int] = None
    calendar: Optional[typing.Any] = None
    default_view: Optional[DefaultView] = None
    syllabus_body: Optional[str] = None
    needs_grading_count: Optional[int] = None
    term: Optional[Term] = None
    course_progress: Optional[CourseProgress] = None
    apply_assignment_group_weights: Optional[bool] = None
    permissions: Optional[Permissions] = None

    is_public: Optional[bool] = None
    is_public_to_auth_users: Optional[bool] = None
    public_syllabus: Optional[bool] = None
    public_syllabus_to_auth: Optional[bool] = None
    public_description: Optional[str] = None
    storage_quota_mb: Optional[int] = None
    storage_quota_used_mb: Optional[int] = None
    hide_final_grades: Optional[bool] = None
    license: Optional[str] = None

    allow_student_assignment_edits: Optional[bool] = None
    allow_wiki_comments: Optional[bool] = None
    allow_student_forum_attachments: Optional[bool] = None
    open_enrollment: Optional[bool] = None
    self_enrollment: Optional[bool] = None
    restrict_enrollments_to_course_dates: Optional[bool] = None
    course_format: Optional[str] = None
    access_restricted_by_date: Optional[bool] = None

    blueprint: Optional[bool] = None
    blueprint_restrictions: Optional[BlueprintRestrictions] = None
    blueprint_restrictions_by_object_type: Optional[
        BlueprintRestrictionsByObjectType
    ] = None
    template: Optional[bool] = None
