# Routes package init
"""
Phonebook Backend: API Routes Package
========================================

Route Inventory:
    - persons.py:  GET/POST   /api/persons
                   GET/PUT/DELETE /api/persons/{id}
    - info.py:     GET  /info
    - health.py:   GET  /health
    - static.py:   GET  /{path}    (frontend build, registered last)

Routes are thin: they unpack the request, call PersonService and return
its result. Business rules live in services/person_service.py.
"""
