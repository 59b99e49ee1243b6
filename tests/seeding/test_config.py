"""
Tests for SeedConfig and the command line entry point.
"""

import logging
from unittest.mock import AsyncMock, patch

import pytest

from hr_assistant.seeding import __main__ as cli
from hr_assistant.seeding.config import SeedConfig
from hr_assistant.seeding.errors import ConfigurationError, GenerationParseError


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's local .env out of the tests."""
    with patch("hr_assistant.seeding.config.load_dotenv"):
        yield


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-gen")
    monkeypatch.setenv("MONGODB_ATLAS_URI", "mongodb+srv://cluster")
    monkeypatch.delenv("OPENAI_EMBEDDINGS_API_KEY", raising=False)
    return monkeypatch


class TestSeedConfig:
    """Tests for SeedConfig.from_env."""

    def test_defaults(self, env):
        config = SeedConfig.from_env()

        assert config.openai_api_key == "sk-gen"
        assert config.mongodb_uri == "mongodb+srv://cluster"
        assert config.database_name == "hr_database"
        assert config.collection_name == "employees"
        assert config.index_name == "vector_index"
        assert config.text_key == "embedding_text"
        assert config.embedding_key == "embedding"
        assert config.embedding_dimensions == 1536

    def test_embeddings_key_falls_back(self, env):
        """Test the embeddings key defaults to the generation key."""
        assert SeedConfig.from_env().embeddings_api_key == "sk-gen"

    def test_separate_embeddings_key(self, env):
        env.setenv("OPENAI_EMBEDDINGS_API_KEY", "sk-embed")

        assert SeedConfig.from_env().embeddings_api_key == "sk-embed"

    def test_overrides(self, env):
        config = SeedConfig.from_env(reset_collection=True, ensure_index=True)

        assert config.reset_collection is True
        assert config.ensure_index is True

    def test_missing_connection_string(self, env):
        env.delenv("MONGODB_ATLAS_URI")

        with pytest.raises(ConfigurationError, match="MONGODB_ATLAS_URI"):
            SeedConfig.from_env()

    def test_missing_api_key(self, env):
        env.delenv("OPENAI_API_KEY")

        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            SeedConfig.from_env()


class TestMain:
    """Tests for the command line entry point."""

    def test_parse_args(self, tmp_path):
        args = cli.parse_args(["--reset", "--ensure-index", "--output-dir", str(tmp_path)])

        assert args.reset is True
        assert args.ensure_index is True
        assert args.output_dir == tmp_path

    def test_success(self, env):
        with patch.object(cli, "seed_database", new=AsyncMock()) as mock_seed:
            assert cli.main(["--reset"]) == 0

        config = mock_seed.await_args.args[0]
        assert config.reset_collection is True
        assert config.ensure_index is False

    def test_missing_environment_exits_nonzero(self, env):
        env.delenv("MONGODB_ATLAS_URI")

        with patch.object(cli, "seed_database", new=AsyncMock()) as mock_seed:
            assert cli.main([]) == 1

        mock_seed.assert_not_awaited()

    def test_seeding_error_exits_nonzero(self, env):
        with patch.object(cli, "seed_database", new=AsyncMock(side_effect=GenerationParseError("bad"))):
            assert cli.main([]) == 1

    def test_unexpected_error_exits_nonzero(self, env, caplog):
        """Test an exception outside the seeding hierarchy is logged, not raised."""
        with patch.object(cli, "seed_database", new=AsyncMock(side_effect=RuntimeError("openai 401"))):
            with caplog.at_level(logging.ERROR):
                assert cli.main([]) == 1

        assert "openai 401" in caplog.text
