"""Notes API router."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from notepad.schemas.note import ErrorResponse, NewNote, Note, UpdateNote
from notepad.services.notes import NoteStore

QUERY_MIN_LENGTH = 1
QUERY_MAX_LENGTH = 10

router = APIRouter()


def get_store(request: Request) -> NoteStore:
    """Return the application's NoteStore."""
    return request.app.state.store


StoreDep = Annotated[NoteStore, Depends(get_store)]

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Note not found"}}


@router.get("", response_model_exclude_none=True)
def list_notes(
    store: StoreDep,
    query: str | None = Query(
        default=None,
        min_length=QUERY_MIN_LENGTH,
        max_length=QUERY_MAX_LENGTH,
        description="Return only notes whose title contains this string.",
    ),
) -> list[Note]:
    return store.list(query)


@router.post("", status_code=201, response_model_exclude_none=True)
def create_note(body: NewNote, store: StoreDep) -> Note:
    return store.create(body)


@router.get("/{note_id}", response_model_exclude_none=True, responses=_NOT_FOUND)
def get_note(note_id: uuid.UUID, store: StoreDep) -> Note:
    return store.get(note_id)


@router.put(
    "/{note_id}",
    response_model_exclude_none=True,
    responses={
        **_NOT_FOUND,
        422: {"model": ErrorResponse, "description": "Body id does not match the path id"},
    },
)
def update_note(note_id: uuid.UUID, body: UpdateNote, store: StoreDep) -> Note:
    """Apply the fields present in the body; omitted fields are left unchanged."""
    return store.update(note_id, body)


@router.delete("/{note_id}", response_model_exclude_none=True, responses=_NOT_FOUND)
def delete_note(note_id: uuid.UUID, store: StoreDep) -> Note:
    """Delete the note and return its final state."""
    return store.delete(note_id)
