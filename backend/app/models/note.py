"""Note models."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict

from app.models.employee import CamelModel


class Note(CamelModel):
    """Immutable timestamped text entry attached to an employee id."""

    model_config = ConfigDict(frozen=True)

    id: str
    employee_id: str
    content: str
    created_at: datetime


class CreateNoteRequest(CamelModel):
    content: str | None = None
