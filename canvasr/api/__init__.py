from ._courses import AsyncCourseHandler, CourseHandler

__all__ = [
    "AsyncCourseHandler",
    "CourseHandler",
]
