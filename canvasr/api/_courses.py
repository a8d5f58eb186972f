from __future__ import annotations

import typing

from ..models import Course

if typing.TYPE_CHECKING:
    from .._client import AsyncCanvas, Canvas, QueryParams
    from .._page import Page
    from .._paginate import AsyncPaginator, Paginator

COURSES_ROUTE = "courses/"


class CourseHandler:
    """Course endpoints, reached through :meth:`Canvas.courses`."""

    def __init__(self, canvas: Canvas) -> None:
        self._canvas = canvas

    def my_courses(self, params: QueryParams = None) -> Page[Course]:
        """First page of the courses the current user is enrolled in.

        ``params`` are sent as-is, e.g. ``{"per_page": 50}`` or
        ``{"enrollment_state": "active"}``.
        """
        return self._canvas.get_page(COURSES_ROUTE, Course, params=params)

    def iter_my_courses(
        self,
        params: QueryParams = None,
        **kwargs: typing.Any,
    ) -> Paginator[Course]:
        """Every course of the current user, fetched page by page."""
        return self._canvas.paginate(COURSES_ROUTE, Course, params=params, **kwargs)


class AsyncCourseHandler:
    def __init__(self, canvas: AsyncCanvas) -> None:
        self._canvas = canvas

    async def my_courses(self, params: QueryParams = None) -> Page[Course]:
        return await self._canvas.get_page(COURSES_ROUTE, Course, params=params)

    def iter_my_courses(
        self,
        params: QueryParams = None,
        **kwargs: typing.Any,
    ) -> AsyncPaginator[Course]:
        return self._canvas.paginate(COURSES_ROUTE, Course, params=params, **kwargs)
