"""
Phonebook Backend: Person Route Handlers
===========================================

What:  CRUD endpoints under /api/persons.
How:   Each handler unpacks the request, makes one PersonService call and
       returns the result. Errors are raised as exceptions and rendered by
       the global handlers in main.py.

Route Inventory:
    GET    /api/persons          list every entry
    GET    /api/persons/{id}     one entry
    POST   /api/persons          create
    PUT    /api/persons/{id}     replace name and number
    DELETE /api/persons/{id}     remove
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from phonebook.database import get_db_session
from phonebook.schemas.person import ErrorResponse, PersonPayload, PersonResponse
from phonebook.services.person_service import person_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Persons"])


@router.get(
    "/persons",
    response_model=List[PersonResponse],
    summary="List all persons",
)
async def list_persons(
    db: AsyncSession = Depends(get_db_session),
) -> List[PersonResponse]:
    """Returns every entry in the phonebook. No pagination or filtering."""
    return await person_service.list_persons(db)


@router.get(
    "/persons/{person_id}",
    response_model=PersonResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Person not found", "model": ErrorResponse},
    },
    summary="Get a single person by ID",
)
async def get_person(
    person_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> PersonResponse:
    """
    person_id is taken as a plain string so that a malformed value reaches
    the service and is reported as {"error": "malformatted id"} with 400,
    rather than FastAPI's own 422.
    """
    return await person_service.get_person(db, person_id)


@router.post(
    "/persons",
    response_model=PersonResponse,
    responses={
        400: {"description": "Missing field, duplicate name or invalid field", "model": ErrorResponse},
    },
    summary="Create a person",
)
async def create_person(
    payload: PersonPayload,
    db: AsyncSession = Depends(get_db_session),
) -> PersonResponse:
    return await person_service.create_person(db, payload.name, payload.number)


@router.put(
    "/persons/{person_id}",
    response_model=PersonResponse,
    responses={
        400: {"description": "Malformed id or invalid field", "model": ErrorResponse},
        404: {"description": "Person not found", "model": ErrorResponse},
    },
    summary="Replace a person's name and number",
)
async def update_person(
    person_id: str,
    payload: PersonPayload,
    db: AsyncSession = Depends(get_db_session),
) -> PersonResponse:
    return await person_service.update_person(db, person_id, payload.name, payload.number)


@router.delete(
    "/persons/{person_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Person not found", "model": ErrorResponse},
    },
    summary="Delete a person",
)
async def delete_person(
    person_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await person_service.delete_person(db, person_id)
    return Response(status_code=204)
