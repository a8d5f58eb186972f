"""
Error Handling
==============

Every canvasr error derives from ``CanvasError``:

    CanvasError
    ├── RequestFailure          (transport error or non-2xx status)
    ├── DecodeFailure           (body is not a JSON array of the model)
    ├── LinkHeaderError
    │   ├── MalformedLinkHeader (unparsable Link header)
    │   └── MissingLinkHeader   (only with require_link_header=True)
    └── ConfigError
        ├── InvalidBaseURL
        └── MissingToken

None of them are retried. The original httpx or pydantic error is kept as
``__cause__``.
"""

import httpx

import canvasr


def main() -> None:
    config = canvasr.CanvasConfig.from_env()

    # ── Non-2xx response ─────────────────────────────────────────────────
    with canvasr.Canvas(config) as canvas:
        try:
            canvas.get_page("courses/0/assignments", dict)
        except canvasr.RequestFailure as exc:
            print(f"  Caught RequestFailure → {exc}")
            print(f"       status: {exc.status_code}")
            print(f"       request URL: {exc.request.url}")
            print(f"       cause: {type(exc.__cause__).__name__}")
    print()

    # ── Strict Link header policy ────────────────────────────────────────
    strict = canvasr.CanvasConfig.build(
        str(config.base_url), config.token, require_link_header=True
    )
    with canvasr.Canvas(strict) as canvas:
        try:
            canvas.get_page("users/self/favorites/courses", dict)
        except canvasr.MissingLinkHeader as exc:
            print(f"  Caught MissingLinkHeader → {exc}")
    print()

    # ── Timeouts are the transport's job ─────────────────────────────────
    impatient = canvasr.CanvasConfig.build(str(config.base_url), config.token, timeout=0.001)
    with canvasr.Canvas(impatient) as canvas:
        try:
            canvas.courses().my_courses()
        except canvasr.RequestFailure as exc:
            if isinstance(exc.__cause__, httpx.TimeoutException):
                print(f"  Timed out: {type(exc.__cause__).__name__}")
            else:
                print(f"  RequestFailure: {exc}")
    print()

    # ── Catch-all ────────────────────────────────────────────────────────
    try:
        with canvasr.Canvas(config) as canvas:
            canvas.courses().iter_my_courses().collect()
    except canvasr.CanvasError as exc:
        print(f"  Caught CanvasError (base class): {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
