"""Custom exceptions for the REST API."""


class BadRequestError(Exception):
    """Request cannot be processed; the message is returned to the client."""
