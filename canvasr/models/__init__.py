from ._base import CanvasModel
from ._courses import (
    AssignmentRestrictions,
    BlueprintRestrictions,
    BlueprintRestrictionsByObjectType,
    Course,
    CourseProgress,
    DefaultView,
    Permissions,
    Term,
    WikiPageRestrictions,
    WorkflowState,
)

__all__ = [
    "AssignmentRestrictions",
    "BlueprintRestrictions",
    "BlueprintRestrictionsByObjectType",
    "CanvasModel",
    "Course",
    "CourseProgress",
    "DefaultView",
    "Permissions",
    "Term",
    "WikiPageRestrictions",
    "WorkflowState",
]
