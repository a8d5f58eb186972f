"""
Building a client
=================

A :class:`canvasr.CanvasConfig` is validated when it is built, so a bad base
URL fails here rather than on the first request.
"""

import os

import canvasr


def main() -> None:
    token = os.environ.get("CANVAS_API_TOKEN", "")

    # ── Fluent builder ───────────────────────────────────────────────────
    try:
        canvas = (
            canvasr.Canvas.builder()
            .set_url("https://canvas.instructure.com/")
            .set_token(token)
            .set_timeout(10.0)
            .build()
        )
    except canvasr.ConfigError as exc:
        print(f"Error while building Canvas: {exc}")
        return
    with canvas:
        print(canvas)

    # ── Explicit config ──────────────────────────────────────────────────
    config = canvasr.CanvasConfig.build("https://canvas.instructure.com", token)
    print(f"  API root: {config.api_url}")

    # ── Missing scheme is rejected up front ──────────────────────────────
    try:
        canvasr.CanvasConfig.build("canvas.instructure.com", token)
    except canvasr.InvalidBaseURL as exc:
        print(f"  Caught InvalidBaseURL → {exc}")


if __name__ == "__main__":
    main()
