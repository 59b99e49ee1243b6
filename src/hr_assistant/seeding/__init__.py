from .config import SeedConfig
from .errors import (
    ConfigurationError,
    DatabaseConnectionError,
    ExternalServiceError,
    GenerationError,
    GenerationParseError,
    SeedingError,
    StorageError,
    ValidationError,
)
from .generator import EmployeeGenerator
from .models import EmployeeRecord, IndexedDocument, format_instructions, parse_records, validate_employee
from .pipeline import IndexingPipeline, SeedResult, seed_database
from .storage import MongoStorage
from .summary import create_employee_summary

__all__ = [
    "SeedConfig",
    "SeedingError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "ExternalServiceError",
    "GenerationError",
    "GenerationParseError",
    "StorageError",
    "ValidationError",
    "EmployeeGenerator",
    "EmployeeRecord",
    "IndexedDocument",
    "format_instructions",
    "parse_records",
    "validate_employee",
    "IndexingPipeline",
    "SeedResult",
    "seed_database",
    "MongoStorage",
    "create_employee_summary",
]
