import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError


@dataclass
class SeedConfig:
    """Configuration for the seeding job."""

    # Credentials (read from the environment)
    openai_api_key: str = ""
    embeddings_api_key: str = ""
    mongodb_uri: str = ""

    # Document store
    database_name: str = "hr_database"
    collection_name: str = "employees"
    index_name: str = "vector_index"
    text_key: str = "embedding_text"
    embedding_key: str = "embedding"
    embedding_dimensions: int = 1536
    similarity: str = "cosine"

    # Models
    llm_model: str = "gpt-3.5-turbo"
    temperature: float = 0.0
    embedding_model: str = "text-embedding-ada-002"

    # Run options
    reset_collection: bool = False
    ensure_index: bool = False
    output_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, **overrides) -> "SeedConfig":
        """
        Build a config from environment variables (and a local .env file).

        Raises:
            ConfigurationError: If a required variable is missing.
        """
        load_dotenv()

        openai_api_key = os.getenv("OPENAI_API_KEY")
        embeddings_api_key = os.getenv("OPENAI_EMBEDDINGS_API_KEY") or openai_api_key
        mongodb_uri = os.getenv("MONGODB_ATLAS_URI")

        missing = [
            name
            for name, value in (
                ("OPENAI_API_KEY", openai_api_key),
                ("OPENAI_EMBEDDINGS_API_KEY", embeddings_api_key),
                ("MONGODB_ATLAS_URI", mongodb_uri),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")

        return cls(
            openai_api_key=openai_api_key,
            embeddings_api_key=embeddings_api_key,
            mongodb_uri=mongodb_uri,
            **overrides,
        )
