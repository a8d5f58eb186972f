"""
Async Client
============

``AsyncCanvas`` mirrors ``Canvas``. Independent traversals can run as
concurrent tasks over one connection pool; each traversal still fetches its
own pages strictly one after the other.
"""

import asyncio

import canvasr


async def count(paginator: canvasr.AsyncPaginator) -> int:
    total = 0
    async for _ in paginator:
        total += 1
    return total


async def main() -> None:
    async with canvasr.AsyncCanvas(canvasr.CanvasConfig.from_env()) as canvas:
        # ── One page ─────────────────────────────────────────────────────
        page = await canvas.courses().my_courses({"per_page": 5})
        print(f"First page: {len(page)} course(s), next → {page.next}")

        # ── Every course ─────────────────────────────────────────────────
        async for course in canvas.courses().iter_my_courses({"per_page": 50}):
            print(f"  {course.id}: {course.name}")

        # ── Two traversals side by side ──────────────────────────────────
        active, completed = await asyncio.gather(
            count(canvas.courses().iter_my_courses({"enrollment_state": "active"})),
            count(canvas.courses().iter_my_courses({"state[]": "completed"})),
        )
        print(f"active={active} completed={completed}")


if __name__ == "__main__":
    asyncio.run(main())
