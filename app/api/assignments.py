# app/api/assignments.py
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from typing import Optional
import logging
import re

from app.core.config import LIST_DEFAULT_LIMIT
from app.core.dependencies import get_store
from app.core.exceptions import InvalidRequest, AssignmentNotFound
from app.core.responses import api_response
from app.models.assignment import AssignmentWrite
from app.models.responses import AssignmentEnvelope, AssignmentListEnvelope, Envelope
from app.services.assignment_store import AssignmentStore
from app.services.dates import is_valid_date

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/assignments", tags=["Assignments"])

INVALID_DATE = "Invalid date format"
EMPTY_CONTENT = "Assignment content cannot be empty"
INVALID_JSON = "Invalid JSON body"
NO_ASSIGNMENT = "No assignment for this date"


def _require_date(date: str) -> None:
    if not is_valid_date(date):
        raise InvalidRequest(INVALID_DATE)


def _parse_limit(limit: Optional[str]) -> int:
    if limit is None or limit == "":
        return LIST_DEFAULT_LIMIT
    if not re.fullmatch(r"[0-9]+", limit) or int(limit) <= 0:
        raise InvalidRequest("Invalid query parameter: limit")
    return int(limit)


@router.get("", response_model=AssignmentListEnvelope)
async def list_assignments(
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: Optional[str] = None,
    store: AssignmentStore = Depends(get_store),
):
    """List assignments, optionally restricted to an inclusive date range."""
    for bound in (start, end):
        if bound and not is_valid_date(bound):
            raise InvalidRequest(INVALID_DATE)
    page_limit = _parse_limit(limit)

    keys = await store.list()
    assignments = []

    for date in keys[:page_limit]:
        # ISO dates order lexically, so plain string comparison is enough
        if start and date < start:
            continue
        if end and date > end:
            continue

        try:
            record = await store.get(date)
        except ValidationError as e:
            logger.error(f"Skipping unreadable assignment ({date}): {e}")
            continue
        if record is not None:
            assignments.append(record)

    assignments.sort(key=lambda a: a.date, reverse=True)

    return api_response(
        assignments,
        count=len(assignments),
        total=len(keys),
    )


@router.get("/{date}", response_model=AssignmentEnvelope)
async def get_assignment(date: str, store: AssignmentStore = Depends(get_store)):
    """Get the assignment for one date; ``data`` is null when none exists."""
    _require_date(date)

    record = await store.get(date)
    if record is None:
        return api_response(None, message=NO_ASSIGNMENT)
    return api_response(record)


@router.put("/{date}", response_model=AssignmentEnvelope)
async def put_assignment(
    date: str,
    request: Request,
    store: AssignmentStore = Depends(get_store),
):
    """Create or update the assignment for one date."""
    _require_date(date)

    try:
        body = await request.json()
    except ValueError:
        raise InvalidRequest(INVALID_JSON)

    try:
        payload = AssignmentWrite.model_validate(body)
    except ValidationError:
        raise InvalidRequest(EMPTY_CONTENT)

    record, created = await store.put(date, payload.content)
    message = "Assignment created" if created else "Assignment updated"
    return api_response(record, message=message)


@router.delete("/{date}", response_model=Envelope)
async def delete_assignment(date: str, store: AssignmentStore = Depends(get_store)):
    """Delete the assignment for one date."""
    _require_date(date)

    if not await store.delete(date):
        raise AssignmentNotFound(NO_ASSIGNMENT)
    return api_response(None, message="Assignment deleted")
