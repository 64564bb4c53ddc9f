"""
API layer for the Reservation API.

Exposes the user endpoints under /api/v1 and maps user store errors to
HTTP status codes.
"""
