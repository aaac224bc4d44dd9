"""
API layer for the User Registry.

Exposes the /api/users CRUD endpoints, the root liveness route and the
global error handlers that shape every error response.
"""
