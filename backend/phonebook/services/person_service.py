"""
Phonebook Backend: Person Service (Business Logic)
=====================================================

What:  All phonebook rules in one place: required fields, name uniqueness,
       not-found handling and translation of storage-layer errors.
How:   Each operation runs one or two awaited queries on the request's
       AsyncSession; commit/rollback is owned by get_db_session.
Who:   Called by the route handlers in routes/persons.py and routes/info.py.

Error Translation:
    malformed id                → MalformedIdError       (400)
    Person field rule fails     → PersonValidationError  (400)
    unique index on name fires  → DuplicateNameError     (400)
    row not found               → NotFoundError          (404)
    any other SQLAlchemyError   → DatabaseError          (500)

PersonService is stateless: it receives the db session for each call.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from phonebook.exceptions import (
    DatabaseError,
    DuplicateNameError,
    MalformedIdError,
    NotFoundError,
    ValidationError,
)
from phonebook.models.person import Person
from phonebook.schemas.person import PersonResponse

logger = logging.getLogger(__name__)


def parse_person_id(raw_id: str) -> uuid.UUID:
    """Converts a path parameter into a UUID, or raises MalformedIdError."""
    try:
        return uuid.UUID(str(raw_id))
    except (ValueError, AttributeError, TypeError):
        raise MalformedIdError(raw_id)


class PersonService:
    """
    Business logic layer for phonebook entries.

    Responsibilities:
        - list_persons():  every entry, ordered by name
        - count_persons(): number of entries (info page)
        - get_person():    single entry with not-found handling
        - create_person(): required fields + uniqueness, then insert
        - update_person(): replace name and number in place
        - delete_person(): hard delete
    """

    async def list_persons(self, db: AsyncSession) -> List[PersonResponse]:
        try:
            result = await db.execute(select(Person).order_by(Person.name))
            persons = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing persons: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve persons. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [PersonResponse.model_validate(person) for person in persons]

    async def count_persons(self, db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count(Person.id)))
        except SQLAlchemyError as e:
            logger.error("Database error counting persons: %s", str(e))
            raise DatabaseError(
                message="Could not count persons. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return result.scalar() or 0

    async def get_person(self, db: AsyncSession, person_id: str) -> PersonResponse:
        """
        Retrieve a single person by id.

        Raises:
            MalformedIdError: person_id is not a valid identifier (→ 400)
            NotFoundError: no person has this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        person = await self._load(db, person_id)
        return PersonResponse.model_validate(person)

    async def create_person(
        self,
        db: AsyncSession,
        name: Optional[str],
        number: Optional[str],
    ) -> PersonResponse:
        """
        Create a new phonebook entry.

        Workflow:
            1. Reject the request if name or number is missing
            2. Reject the request if the name is already taken
            3. Build the Person (model validators run here)
            4. Flush so the insert happens inside this call; a unique index
               violation from a concurrent create surfaces as IntegrityError

        Raises:
            ValidationError: name or number missing (→ 400 "content missing")
            DuplicateNameError: name already in the phonebook (→ 400)
            PersonValidationError: a field rule failed (→ 400)
        """
        if not name or not number:
            raise ValidationError(
                message="content missing",
                context={"name": bool(name), "number": bool(number)},
            )

        if await self._name_taken(db, name):
            logger.info("Rejected duplicate name: %s", name)
            raise DuplicateNameError(name)

        person = Person(name=name, number=number)
        db.add(person)
        await self._flush(db, name)

        logger.info("Person %s created", person.id)
        return PersonResponse.model_validate(person)

    async def update_person(
        self,
        db: AsyncSession,
        person_id: str,
        name: Optional[str],
        number: Optional[str],
    ) -> PersonResponse:
        """
        Replace name and number on an existing entry.

        Both fields are assigned unconditionally, so an absent field fails the
        model's "is required" rule instead of being silently kept.

        Raises:
            MalformedIdError, NotFoundError, DuplicateNameError,
            PersonValidationError
        """
        person = await self._load(db, person_id)

        if name and name != person.name and await self._name_taken(db, name):
            raise DuplicateNameError(name)

        person.name = name
        person.number = number
        await self._flush(db, name)

        logger.info("Person %s updated", person.id)
        return PersonResponse.model_validate(person)

    async def delete_person(self, db: AsyncSession, person_id: str) -> None:
        """
        Remove an entry.

        Raises:
            MalformedIdError: person_id is not a valid identifier (→ 400)
            NotFoundError: no person has this id (→ 404)
        """
        person = await self._load(db, person_id)
        try:
            await db.delete(person)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting person %s: %s", person_id, str(e))
            raise DatabaseError(
                message="Could not delete the person. Please try again.",
                context={"person_id": person_id},
            )
        logger.info("Person %s deleted", person_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _load(self, db: AsyncSession, person_id: str) -> Person:
        pk = parse_person_id(person_id)
        try:
            person = await db.get(Person, pk)
        except SQLAlchemyError as e:
            logger.error("Database error fetching person %s: %s", person_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the person. Please try again.",
                context={"person_id": person_id},
            )
        if person is None:
            raise NotFoundError(resource="person", resource_id=person_id)
        return person

    async def _name_taken(self, db: AsyncSession, name: str) -> bool:
        try:
            result = await db.execute(select(Person.id).where(Person.name == name))
        except SQLAlchemyError as e:
            logger.error("Database error checking name %r: %s", name, str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})
        return result.scalar_one_or_none() is not None

    async def _flush(self, db: AsyncSession, name: Optional[str]) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            # Unique index on persons.name: another request inserted the same
            # name between our check and this insert
            logger.warning("Unique constraint hit for name %r: %s", name, e.orig)
            raise DuplicateNameError(name or "")
        except SQLAlchemyError as e:
            logger.error("Database error saving person: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the person. Please try again.",
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
person_service = PersonService()
