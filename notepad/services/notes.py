"""Notes service — the in-memory note collection and its CRUD operations."""

import logging
import threading
import uuid

from notepad.schemas.note import NewNote, Note, UpdateNote

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised when no note with the requested id exists."""

    def __init__(self, note_id: uuid.UUID) -> None:
        self.note_id = note_id
        super().__init__(f'The note with id "{note_id}" was not found.')


class ConflictingIdError(Exception):
    """Raised when an update body carries an id other than the addressed one."""

    def __init__(self, note_id: uuid.UUID, body_id: uuid.UUID) -> None:
        self.note_id = note_id
        self.body_id = body_id
        super().__init__(f'The note ids do not match. param="{note_id}", note.id="{body_id}"')


class NoteStore:
    """Process-local note collection keyed by id.

    All reads and writes go through the methods below, each of which holds
    ``_lock`` for its whole check-then-act sequence. Notes handed out are
    copies, so callers cannot mutate stored state.
    """

    def __init__(self) -> None:
        self._notes: dict[uuid.UUID, Note] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        with self._lock:
            return note_id in self._notes

    def list(self, query: str | None = None) -> list[Note]:
        """Return all notes, or only those whose title contains *query*.

        Matching is a case-sensitive substring test. Results come back in
        insertion order, which callers should not rely on.
        """
        with self._lock:
            notes = list(self._notes.values())
        if query is not None:
            notes = [n for n in notes if query in n.title]
        logger.debug("Listed %d notes (query=%r)", len(notes), query)
        return [n.model_copy() for n in notes]

    def get(self, note_id: uuid.UUID) -> Note:
        """Return the note with *note_id*; raise NotFoundError if absent."""
        with self._lock:
            note = self._lookup(note_id)
        return note.model_copy()

    def create(self, new_note: NewNote) -> Note:
        """Store *new_note* under a freshly generated id and return it."""
        note = Note(id=uuid.uuid4(), **new_note.model_dump(exclude_unset=True))
        with self._lock:
            self._notes[note.id] = note
        logger.info("Created note %s", note.id)
        return note.model_copy()

    def update(self, note_id: uuid.UUID, patch: UpdateNote) -> Note:
        """Overwrite the fields present in *patch* on the note with *note_id*.

        Fields absent from the patch keep their stored value and the id never
        changes. Raises NotFoundError if the note is absent and
        ConflictingIdError if ``patch.id`` is set to a different id; in both
        cases the store is left untouched.
        """
        with self._lock:
            current = self._lookup(note_id)
            if patch.id is not None and patch.id != note_id:
                raise ConflictingIdError(note_id, patch.id)
            changes = patch.model_dump(exclude_unset=True, exclude={"id"})
            updated = current.model_copy(update=changes)
            self._notes[note_id] = updated
        logger.info("Updated note %s (fields: %s)", note_id, ", ".join(sorted(changes)) or "none")
        return updated.model_copy()

    def delete(self, note_id: uuid.UUID) -> Note:
        """Remove the note with *note_id* and return its final state."""
        with self._lock:
            self._lookup(note_id)
            note = self._notes.pop(note_id)
        logger.info("Deleted note %s", note_id)
        return note

    def _lookup(self, note_id: uuid.UUID) -> Note:
        # Caller must hold _lock.
        note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(note_id)
        return note
