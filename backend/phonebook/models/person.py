"""
Phonebook Backend: Person SQLAlchemy Model
=============================================

What:  ORM model representing the `persons` table.
How:   Inherits from the shared DeclarativeBase; init_models() creates the
       table and its unique index at startup.
Who:   Used by PersonService for every CRUD operation.

Table Design:
    - UUID primary key, assigned once at creation and never changed
    - name: unique index, so the database itself rejects a second person
      with the same name even when two creates race past the service check
    - number: free-form string (formats vary by country)

Field rules are enforced with @validates, which runs on every attribute
assignment: construction, update in place, anything else. A broken rule
raises PersonValidationError, which the API maps to 400.
"""

import uuid
from typing import Optional

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates

from phonebook.database import Base
from phonebook.exceptions import PersonValidationError

NAME_MAX_LENGTH = 255
NUMBER_MAX_LENGTH = 64


class Person(Base):
    """
    A single phonebook entry.

    Lifecycle:
        1. Created by POST /api/persons after the duplicate-name check
        2. name and number replaced wholesale by PUT /api/persons/{id}
        3. Removed by DELETE /api/persons/{id} (hard delete)
    """

    __tablename__ = "persons"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )

    number: Mapped[str] = mapped_column(
        String(NUMBER_MAX_LENGTH),
        nullable=False,
    )

    @validates("name", "number")
    def _validate_field(self, key: str, value: Optional[str]) -> str:
        limit = NAME_MAX_LENGTH if key == "name" else NUMBER_MAX_LENGTH
        if value is None or not str(value).strip():
            raise PersonValidationError(message=f"{key} is required", field=key)
        if not isinstance(value, str):
            raise PersonValidationError(message=f"{key} must be a string", field=key)
        if len(value) > limit:
            raise PersonValidationError(
                message=f"{key} must be at most {limit} characters",
                field=key,
                context={"length": len(value)},
            )
        return value

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.name}')>"
