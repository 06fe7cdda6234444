from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request, Response, status
from pydantic import ValidationError

from app.core.exceptions import InvalidArgumentError, UpstreamError
from app.models.employee import Employee
from app.models.note import CreateNoteRequest, Note
from app.services.employee_service import employee_service
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees():
    try:
        return await employee_service.fetch_employees()
    except UpstreamError as err:
        logger.error("Random-user API failure while listing employees: %s", err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.get("/{employee_id}/notes", response_model=list[Note], name="list_notes")
async def list_notes(employee_id: str):
    try:
        return note_service.list_notes(employee_id)
    except Exception as err:
        logger.exception("Failed to list notes for employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve notes",
        ) from err


@router.post("/{employee_id}/notes", response_model=Note, status_code=status.HTTP_201_CREATED)
async def create_note(
    employee_id: str,
    request: Request,
    response: Response,
    payload: Any = Body(default=None),
):
    # a missing body or non-string content counts as missing content
    try:
        content = CreateNoteRequest.model_validate(payload or {}).content
    except ValidationError:
        content = None

    if not content or not content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Note content is required",
        )

    try:
        note = note_service.add_note(employee_id, content)
    except InvalidArgumentError as e:
        logger.warning("Invalid request for creating note: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception as err:
        logger.exception("Failed to create note for employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create note",
        ) from err

    response.headers["Location"] = str(request.url_for("list_notes", employee_id=employee_id))
    return note
