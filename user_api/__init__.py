"""
User Registry API root package.

This package contains the FastAPI app entry point (main.py), the /api/users
routes, the user domain model, validation rules and use cases, and the
MongoDB infrastructure backing them.
"""
