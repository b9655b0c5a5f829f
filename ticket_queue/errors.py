"""Errors raised by the queue services.

Routers never build error bodies themselves; ``ticket_queue.main`` turns any
``QueueError`` into ``{"error": message}`` with the class's status code.
"""


class QueueError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QueueError):
    status_code = 400


class NotFoundError(QueueError):
    status_code = 404


class TransientStoreError(QueueError):
    """Conflict or lock timeout that persisted through every retry."""


class StoreUnavailableError(QueueError):
    """The store failed in a way retrying will not fix."""
