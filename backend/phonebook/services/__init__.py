# Services package init
"""
Phonebook Backend: Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services receive the request's AsyncSession, apply the phonebook rules
       and return response schemas or raise application exceptions.

Service Inventory:
    - PersonService: CRUD for phonebook entries, name uniqueness, error translation
"""
