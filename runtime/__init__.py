"""
Runtime package for the assistant relay HTTP service.

This package contains:
- API layer (FastAPI app factory, routes, CORS handling)
- Agents (the create-thread / run / poll / extract sequence)
- Models (Pydantic request and response schemas)
"""
