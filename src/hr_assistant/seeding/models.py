"""
Employee record schema.

The schema is the contract between the language model and the vector store:
the generator is told to produce it, every generated record is validated
against it, and the validated record is stored verbatim as document metadata.
"""

import json
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, EmailStr, StrictBool, StrictFloat, StrictInt, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

# No "4" -> 4 or "yes" -> True; ISO date strings are the only coerced values.
Number = Union[StrictInt, StrictFloat]


def _require_date_string(value: Any) -> Any:
    """Only ISO strings (or date objects) reach the date parser; no timestamps."""
    if isinstance(value, (str, date)):
        return value
    raise ValueError(f"Expected an ISO date string, got {type(value).__name__}")


DateStr = Annotated[date, BeforeValidator(_require_date_string)]


class Address(BaseModel):
    street: str
    city: str
    state: str
    postal_code: str
    country: str


class ContactDetails(BaseModel):
    email: EmailStr
    phone_number: str


class JobDetails(BaseModel):
    job_title: str
    department: str
    manager: str
    hire_date: DateStr
    salary: Number
    currency: str


class WorkLocation(BaseModel):
    nearest_office: str
    is_remote: StrictBool


class PerformanceReview(BaseModel):
    review_date: DateStr
    rating: Number
    comments: str


class Benefits(BaseModel):
    health_insurance: str
    retirement_plan: str
    paid_time_off: str


class EmergencyContact(BaseModel):
    name: str
    relationship: str
    phone_number: str


class EmployeeRecord(BaseModel):
    """A single (synthetic) employee."""

    employee_id: str
    first_name: str
    last_name: str
    date_of_birth: DateStr
    address: Address
    contact_details: ContactDetails
    job_details: JobDetails
    work_location: WorkLocation
    reporting_manager: Optional[str] = None
    skills: List[str]
    performance_review: List[PerformanceReview]
    benefits: Benefits
    emergency_contact: EmergencyContact
    notes: str


EmployeeList = TypeAdapter(List[EmployeeRecord])


def _format_loc(loc) -> str:
    """Turn a pydantic error location into a dotted path, e.g. [0].address.city."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _error_paths(exc: PydanticValidationError) -> List[str]:
    return [_format_loc(error["loc"]) for error in exc.errors()]


def _error_messages(exc: PydanticValidationError) -> List[str]:
    return [f"{_format_loc(error['loc'])}: {error['msg']}" for error in exc.errors()]


@dataclass
class ValidationResult:
    """Outcome of validating one untyped value against EmployeeRecord."""

    record: Optional[EmployeeRecord] = None
    errors: List[str] = field(default_factory=list)
    paths: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None

    def unwrap(self) -> EmployeeRecord:
        if self.record is None:
            raise ValidationError("; ".join(self.errors), paths=self.paths)
        return self.record


def validate_employee(data: Any) -> ValidationResult:
    """Validate a single record without raising."""
    try:
        return ValidationResult(record=EmployeeRecord.model_validate(data))
    except PydanticValidationError as e:
        return ValidationResult(errors=_error_messages(e), paths=_error_paths(e))


@dataclass
class ParseResult:
    """
    Outcome of parsing a raw model response.

    Either `records` is set, or `error` describes why parsing failed. `kind`
    is "syntax" when the text is not a JSON array and "validation" when the
    array does not match the schema.
    """

    records: Optional[List[EmployeeRecord]] = None
    error: Optional[str] = None
    kind: Optional[str] = None
    paths: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.records is not None


_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def parse_records(text: str) -> ParseResult:
    """Parse model output (bare JSON or a fenced ```json block) into records."""
    fence = _FENCE_RE.search(text)
    payload = fence.group(1) if fence else text
    payload = payload.strip()

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        return ParseResult(error=f"Response is not valid JSON: {e}", kind="syntax")

    if not isinstance(data, list):
        return ParseResult(
            error=f"Expected a JSON array of records, got {type(data).__name__}",
            kind="syntax",
        )

    try:
        return ParseResult(records=EmployeeList.validate_python(data))
    except PydanticValidationError as e:
        return ParseResult(
            error="; ".join(_error_messages(e)),
            kind="validation",
            paths=_error_paths(e),
        )


def format_instructions() -> str:
    """Describe the expected output (a JSON array of EmployeeRecord) for a prompt."""
    schema = json.dumps(EmployeeList.json_schema(), indent=2)
    return (
        "You must format your output as a JSON array that adheres to the JSON Schema below.\n"
        "Every field is required unless marked otherwise. Dates use the YYYY-MM-DD format, "
        "numbers are JSON numbers and booleans are JSON booleans.\n"
        "Your output will be parsed and type-checked against the schema, so make sure all "
        "fields match it exactly and there are no trailing commas.\n\n"
        "Here is the JSON Schema your output must adhere to. Include the enclosing markdown codeblock:\n"
        f"```json\n{schema}\n```"
    )


@dataclass
class IndexedDocument:
    """A record ready for the vector store: summary text, metadata and embedding."""

    page_content: str
    metadata: EmployeeRecord
    embedding: List[float]

    def to_document(self, text_key: str, embedding_key: str) -> Dict[str, Any]:
        """Flatten into a MongoDB document; record fields sit at the top level."""
        document = self.metadata.model_dump(mode="json")
        document[text_key] = self.page_content
        document[embedding_key] = list(self.embedding)
        return document
