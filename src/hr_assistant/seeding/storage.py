import logging
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from pymongo.operations import SearchIndexModel

from .config import SeedConfig
from .errors import DatabaseConnectionError, StorageError
from .models import IndexedDocument

logger = logging.getLogger(__name__)


def vector_index_definition(config: SeedConfig) -> Dict[str, Any]:
    """Atlas Vector Search definition over the embedding field."""
    return {
        "fields": [
            {
                "type": "vector",
                "path": config.embedding_key,
                "numDimensions": config.embedding_dimensions,
                "similarity": config.similarity,
            }
        ]
    }


class MongoStorage:
    """Handles interactions with the MongoDB Atlas employee collection."""

    def __init__(self, config: SeedConfig, client: Optional[MongoClient] = None):
        self.config = config
        self.client = client
        self.collection = None

    def connect(self):
        """
        Open the client and ping the deployment.

        Raises:
            DatabaseConnectionError: If the deployment cannot be reached.
        """
        try:
            if self.client is None:
                self.client = MongoClient(self.config.mongodb_uri)
            self.client.admin.command("ping")
        except PyMongoError as e:
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

        logger.info("Pinged your deployment. Connected to MongoDB")
        self.collection = self.client[self.config.database_name][self.config.collection_name]
        logger.info(f"Using collection: {self.config.database_name}.{self.config.collection_name}")

    def clear_collection(self) -> int:
        """Delete every document in the collection."""
        try:
            result = self.collection.delete_many({})
        except PyMongoError as e:
            raise StorageError(f"Could not clear {self.config.collection_name}: {e}") from e
        logger.info(f"Deleted {result.deleted_count} documents from {self.config.collection_name}")
        return result.deleted_count

    def ensure_vector_index(self) -> bool:
        """Create the vector search index if it does not exist. Returns True if created."""
        try:
            existing = list(self.collection.list_search_indexes(self.config.index_name))
            if existing:
                logger.info(f"Vector index already exists: {self.config.index_name}")
                return False

            logger.info(f"Creating vector index: {self.config.index_name}")
            self.collection.create_search_index(
                SearchIndexModel(
                    definition=vector_index_definition(self.config),
                    name=self.config.index_name,
                    type="vectorSearch",
                )
            )
        except PyMongoError as e:
            raise StorageError(f"Could not set up vector index {self.config.index_name}: {e}") from e
        return True

    def insert_document(self, document: IndexedDocument):
        """Insert one indexed document. Re-inserting a record creates a duplicate."""
        result = self.collection.insert_one(
            document.to_document(self.config.text_key, self.config.embedding_key)
        )
        return result.inserted_id

    def close(self):
        """Close MongoDB client."""
        if self.client:
            self.client.close()
            logger.info("MongoDB client closed")
