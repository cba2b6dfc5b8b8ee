"""
Pydantic models used by the relay runtime.

- api_models: HTTP request/response schemas
"""
