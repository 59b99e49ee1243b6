"""
Synthetic employee generation.

Asks the chat model for a batch of employee records in a single request and
parses the reply strictly against the EmployeeRecord schema.
"""

import logging
from typing import Any, List, Optional, Union

from langchain_openai import ChatOpenAI
from langfuse import observe

from .config import SeedConfig
from .errors import GenerationError, GenerationParseError, ValidationError
from .models import EmployeeRecord, format_instructions, parse_records

logger = logging.getLogger(__name__)


GENERATION_PROMPT = """You are a helpful assistant that generates synthetic employee data. Generate synthetic employee records with the following details.

Each employee record should have the following fields: employee_id, first_name, last_name, date_of_birth, address, contact_details, job_details, work_location, reporting_manager, skills, performance_review, benefits, emergency_contact, notes.

- The employee_id should be a unique string.
- The first_name and last_name should be random names.
- The date_of_birth should be a random date between 1950 and 2000.
- The address should be a random address.
- The contact_details should be a random email and phone number.
- The job_details should be a random job title, department, manager, hire_date, salary, and currency.
- The work_location should be a random nearest_office and is_remote.
- The reporting_manager should be a random name.
- The skills should be random skills.
- The performance_review should be a random review_date, rating, and comments.
- The benefits should be a random health_insurance, retirement_plan, and paid_time_off.
- The emergency_contact should be a random name, relationship, and phone_number.
- The notes should be a random note.

Ensure variety in the data and that it is realistic.

{format_instructions}"""


def message_text(content: Union[str, List[Any]]) -> str:
    """Flatten message content; chat models may return a list of content blocks."""
    if isinstance(content, str):
        return content

    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class EmployeeGenerator:
    """Generates synthetic employee records with a single LLM call."""

    def __init__(self, config: SeedConfig, llm: Optional[ChatOpenAI] = None):
        self.config = config
        self.llm = llm or ChatOpenAI(
            model=config.llm_model,
            temperature=config.temperature,
            api_key=config.openai_api_key,
        )

    def build_prompt(self) -> str:
        return GENERATION_PROMPT.format(format_instructions=format_instructions())

    @observe(as_type="generation")
    async def generate(self) -> List[EmployeeRecord]:
        """
        Generate a batch of employee records.

        Returns:
            Validated employee records, in the order the model produced them.

        Raises:
            GenerationError: If the chat model request fails.
            GenerationParseError: If the reply is not a JSON array.
            ValidationError: If any record does not match the schema.
        """
        logger.info("Generating synthetic employee records...")
        try:
            response = await self.llm.ainvoke(self.build_prompt())
        except Exception as e:
            raise GenerationError(f"Chat model request failed: {e}") from e

        result = parse_records(message_text(response.content))
        if not result.ok:
            if result.kind == "validation":
                raise ValidationError(f"Generated records failed validation: {result.error}", paths=result.paths)
            raise GenerationParseError(result.error)

        logger.info(f"Generated {len(result.records)} employee records")
        return result.records
