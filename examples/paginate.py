"""
Example: walking a paged collection

Canvas returns collections one page at a time. Every response carries a
``Link`` header such as::

    Link: <https://canvas.example.edu/api/v1/courses?page=2&per_page=10>; rel="next",
          <https://canvas.example.edu/api/v1/courses?page=1&per_page=10>; rel="first",
          <https://canvas.example.edu/api/v1/courses?page=4&per_page=10>; rel="last"

``my_courses()`` returns one :class:`canvasr.Page`. ``iter_my_courses()``
returns a lazy :class:`canvasr.Paginator` that follows ``rel="next"`` until
the server stops sending one.

Set ``CANVAS_API_URL`` and ``CANVAS_API_TOKEN`` before running.
"""

import canvasr


def single_page(canvas: canvasr.Canvas) -> None:
    page = canvas.courses().my_courses({"per_page": 10})

    print(f"  {len(page)} course(s) on {page.current}")
    print(f"  next:  {page.next}")
    print(f"  prev:  {page.prev}")
    print(f"  first: {page.first}")
    print(f"  last:  {page.last}")
    for course in page:
        print(f"    {course.id}: {course.name}")


def every_page(canvas: canvasr.Canvas) -> None:
    paginator = canvas.courses().iter_my_courses({"per_page": 10})
    for course in paginator:
        print(f"  [page {paginator.pages_fetched}] {course.id}: {course.name}")
    print(f"Total pages fetched: {paginator.pages_fetched}")


def capped(canvas: canvasr.Canvas) -> None:
    courses = canvas.courses().iter_my_courses(max_pages=2).collect()
    print(f"Collected {len(courses)} course(s) from at most 2 pages")


def failures_inline(canvas: canvasr.Canvas) -> None:
    """Receive a failed page fetch as the final item instead of an exception."""
    for result in canvas.courses().iter_my_courses(return_exceptions=True):
        if isinstance(result, canvasr.CanvasError):
            print(f"  stopped early: {type(result).__name__}: {result}")
        else:
            print(f"  {result.id}: {result.name}")


def generic_resource(canvas: canvasr.Canvas) -> None:
    """Any JSON-array endpoint can be paginated into plain dicts."""
    for account in canvas.paginate("accounts", dict, params={"per_page": 50}):
        print(f"  account {account['id']}: {account.get('name')}")


if __name__ == "__main__":
    with canvasr.Canvas(canvasr.CanvasConfig.from_env()) as canvas:
        print("=== One page ===")
        single_page(canvas)

        print("\n=== Every page ===")
        every_page(canvas)

        print("\n=== At most two pages ===")
        capped(canvas)

        print("\n=== Failures inline ===")
        failures_inline(canvas)

        print("\n=== Plain dicts ===")
        generic_resource(canvas)
