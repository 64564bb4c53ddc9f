"""Application layer: request/response DTOs and user use cases."""
