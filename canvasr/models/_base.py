from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CanvasModel(BaseModel):
    """Base for Canvas payloads.

    Canvas adds fields without notice, so unknown keys are ignored rather
    than rejected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
