"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, middleware and the error envelope. It
is thin: it calls the vehicle service and translates Results to HTTP
responses.

Structure:
- routers/system.py: Root and health endpoints
- routers/api/vehicles.py: Vehicles resource
- routers/api/errors/: Error envelope builder and exception handlers
- routers/api/middleware/: Trace and request logging middleware

The presentation layer depends on the application layer but contains NO
business logic.
"""
