"""
Phonebook Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the phonebook's error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error bodies of the form {"error": "<message>"}.
Who:   Raised by the Person model, the service layer and route handlers.

Exception Hierarchy:
    PhonebookError (base)
    ├── ValidationError            → 400 Bad Request (client can fix)
    │   ├── DuplicateNameError     → 400 (name already in the phonebook)
    │   ├── PersonValidationError  → 400 (field rule failed on the model)
    │   └── MalformedIdError       → 400 (id is not a valid identifier)
    ├── NotFoundError              → 404 Not Found
    └── DatabaseError              → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class PhonebookError(Exception):
    """
    Base exception for all phonebook application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PhonebookError):
    """
    Raised when client input fails validation.

    When:    Missing name or number in a create request.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateNameError(ValidationError):
    """
    Raised when a person with the same name already exists.

    Detected either by the existence check before insert or by the unique
    index on persons.name when two creates race.
    """

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["name"] = name
        super().__init__(
            message="that name is already in the phonebook",
            field="name",
            context=ctx,
        )
        self.name = name


class PersonValidationError(ValidationError):
    """
    Raised by the Person model when a field rule fails on assignment.

    This is the storage layer's own validation: it fires on every write path
    (create and update) regardless of what the route already checked.
    """


class MalformedIdError(ValidationError):
    """Raised when a person id cannot be parsed into an identifier."""

    def __init__(self, raw_id: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["id"] = raw_id
        super().__init__(message="malformatted id", field="id", context=ctx)
        self.raw_id = raw_id


class NotFoundError(PhonebookError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/persons/{id} with an id that matches nothing.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PhonebookError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, driver failure.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; details are
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
