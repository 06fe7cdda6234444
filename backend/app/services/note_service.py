"""Per-employee notes: an append-only log held in process memory."""

from __future__ import annotations

import logging
import threading
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from typing import Protocol

from app.core.exceptions import InvalidArgumentError
from app.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore(Protocol):
    def append(self, note: Note) -> None: ...

    def list_for(self, employee_id: str) -> list[Note]: ...


class InMemoryNoteStore:
    """Employee id -> notes in insertion order, guarded by a single lock.

    Nothing is evicted or persisted; contents live as long as the process.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._notes: defaultdict[str, list[Note]] = defaultdict(list)

    def append(self, note: Note) -> None:
        with self._lock:
            self._notes[note.employee_id].append(note)

    def list_for(self, employee_id: str) -> list[Note]:
        with self._lock:
            # .get so that reading an unknown id does not create an entry
            return list(self._notes.get(employee_id, ()))


class NoteService:
    def __init__(self, store: NoteStore | None = None) -> None:
        self.store: NoteStore = store if store is not None else InMemoryNoteStore()

    def list_notes(self, employee_id: str) -> list[Note]:
        """Return the employee's notes, newest first. Blank ids yield an empty list."""
        if not employee_id or not employee_id.strip():
            logger.warning("list_notes called with empty employee_id")
            return []

        notes = self.store.list_for(employee_id)
        # reversed first so equal timestamps keep the later insert in front
        return sorted(reversed(notes), key=lambda n: n.created_at, reverse=True)

    def add_note(self, employee_id: str, content: str) -> Note:
        if not employee_id or not employee_id.strip():
            raise InvalidArgumentError("Employee ID cannot be empty")
        if not content or not content.strip():
            raise InvalidArgumentError("Note content cannot be empty")

        note = Note(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        self.store.append(note)
        logger.info("Note %s added for employee %s", note.id, employee_id)
        return note


note_service = NoteService()
