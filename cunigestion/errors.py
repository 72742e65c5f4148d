from __future__ import annotations


class CuniGestionError(Exception):
    """Base class for record store and aggregation errors."""


class ValidationError(CuniGestionError):
    """A record is missing a required field or carries an invalid value.

    Raised before anything is written.
    """

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(CuniGestionError):
    def __init__(self, collection: str, record_id: int):
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id


class StorageFault(CuniGestionError):
    """Reading or writing a persisted collection failed."""
