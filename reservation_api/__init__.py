"""
Reservation API: root package.

This package contains the FastAPI app entry point (main.py), the user API
routes, the user domain (model, validation, store contract), password
hashing, and the MongoDB / in-memory store backends.
"""
