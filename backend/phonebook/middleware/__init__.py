"""
Phonebook Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [CORS] → [GZip] → Route Handler

    1. Request ID first: every later log line can read it
    2. Logging: records status and duration once the response is built
    3. CORS: applied by Starlette's CORSMiddleware (handles preflight)
"""
