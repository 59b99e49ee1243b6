import asyncio
import datetime
import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings
from pymongo.errors import ConnectionFailure

from .config import SeedConfig
from .errors import DatabaseConnectionError, ExternalServiceError
from .generator import EmployeeGenerator
from .models import EmployeeRecord, IndexedDocument
from .storage import MongoStorage
from .summary import create_employee_summary

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    indexed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class IndexingPipeline:
    """
    Embeds and stores employee records, one at a time.

    Records are processed strictly sequentially: one embedding request and one
    insert in flight at most. A failure on one record is logged and skipped;
    only a lost database connection stops the run.
    """

    def __init__(
        self,
        config: SeedConfig,
        storage: MongoStorage,
        embeddings: Optional[Embeddings] = None,
    ):
        self.config = config
        self.storage = storage
        self.embeddings = embeddings or OpenAIEmbeddings(
            model=config.embedding_model,
            api_key=config.embeddings_api_key,
        )

    async def index_record(self, record: EmployeeRecord):
        """Render, embed and store a single record."""
        summary = create_employee_summary(record)
        try:
            embedding = await self.embeddings.aembed_query(summary)
            # pymongo is synchronous; keep the insert off the event loop
            await asyncio.to_thread(
                self.storage.insert_document,
                IndexedDocument(page_content=summary, metadata=record, embedding=embedding),
            )
        except ConnectionFailure as e:
            raise DatabaseConnectionError(
                f"Lost connection to MongoDB while indexing {record.employee_id}: {e}"
            ) from e
        except Exception as e:
            raise ExternalServiceError(record.employee_id, e) from e

    async def index_records(self, records: List[EmployeeRecord]) -> SeedResult:
        result = SeedResult()
        for record in records:
            try:
                await self.index_record(record)
            except ExternalServiceError as e:
                logger.error(str(e), exc_info=True)
                result.failed.append(e.employee_id)
                continue

            logger.info(f"Indexed record with employee_id: {record.employee_id}")
            result.indexed.append(record.employee_id)

        return result


def save_seed_contract(config: SeedConfig, records: List[EmployeeRecord], result: SeedResult):
    """Write the generated records and run outcome to a JSON file in output_dir."""
    config.output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.datetime.now()

    contract: Dict[str, Any] = {
        "seed_metadata": {
            "seed_date": timestamp.isoformat(),
            "llm_model": config.llm_model,
            "embedding_model": config.embedding_model,
            "database": config.database_name,
            "collection": config.collection_name,
            "index_name": config.index_name,
        },
        "result": asdict(result),
        "records": [record.model_dump(mode="json") for record in records],
    }

    output_path = config.output_dir / f"employees_seed_{timestamp:%Y%m%d_%H%M%S}.json"
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(contract, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved seed contract to: {output_path}")
    return output_path


async def seed_database(
    config: SeedConfig,
    storage: Optional[MongoStorage] = None,
    generator: Optional[EmployeeGenerator] = None,
    embeddings: Optional[Embeddings] = None,
) -> SeedResult:
    """
    Run the full seeding job: connect, generate, index, disconnect.

    Raises:
        DatabaseConnectionError: If MongoDB is unreachable or the connection drops.
        StorageError: If resetting the collection or creating the index fails.
        GenerationError: If the chat model request fails.
        GenerationParseError: If the model reply cannot be parsed.
        ValidationError: If generated records do not match the schema.
    """
    storage = storage or MongoStorage(config)

    logger.info("=" * 80)
    logger.info(f"Seeding {config.database_name}.{config.collection_name}")
    logger.info("=" * 80)

    try:
        storage.connect()

        if config.reset_collection:
            storage.clear_collection()
        if config.ensure_index:
            storage.ensure_vector_index()

        generator = generator or EmployeeGenerator(config)
        records = await generator.generate()

        pipeline = IndexingPipeline(config, storage, embeddings=embeddings)
        result = await pipeline.index_records(records)

        if config.output_dir is not None:
            save_seed_contract(config, records, result)
    finally:
        storage.close()

    logger.info("=" * 80)
    logger.info(f"Seeding complete! Indexed: {len(result.indexed)}, failed: {len(result.failed)}")
    logger.info("=" * 80)
    return result
