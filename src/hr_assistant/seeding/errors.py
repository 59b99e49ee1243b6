"""Exceptions raised while seeding the employee collection."""

from typing import List, Optional


class SeedingError(Exception):
    """Base class for all seeding failures."""


class ConfigurationError(SeedingError):
    """Required configuration (API keys, connection string) is missing."""


class DatabaseConnectionError(SeedingError):
    """The document store could not be reached or the connection was lost."""


class GenerationParseError(SeedingError):
    """The model response could not be parsed as a JSON array of records."""


class ValidationError(SeedingError):
    """Generated data does not match the employee record schema."""

    def __init__(self, message: str, paths: Optional[List[str]] = None):
        super().__init__(message)
        self.paths = paths or []


class ExternalServiceError(SeedingError):
    """Embedding or storage failure for a single record."""

    def __init__(self, employee_id: str, cause: Exception):
        super().__init__(f"Failed to index employee {employee_id}: {cause}")
        self.employee_id = employee_id
        self.cause = cause


class GenerationError(SeedingError):
    """The chat model request itself failed (auth, network, quota)."""


class StorageError(SeedingError):
    """A collection-level MongoDB operation (reset, index setup) failed."""
