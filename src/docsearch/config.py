"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docsearch.domain.value_objects import ChunkingStrategy

_DEFAULT_EMBEDDING_URLS = {
    "openai": "https://api.openai.com/v1",
    "ollama": "http://localhost:11434/v1",
}


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Qdrant
    qdrant_url: str = Field(
        default="http://localhost:6333",
        description="Qdrant server URL",
    )
    qdrant_api_key: str = Field(default="", description="Qdrant API key")
    qdrant_collection: str = Field(
        default="docsearch_chunks",
        description="Name of the collection holding chunk points",
    )

    # Embedding API (OpenAI compatible)
    embedding_provider: Literal["openai", "ollama"] = Field(
        default="ollama",
        description="Embedding provider, used to pick a default API URL",
    )
    embedding_api_url: str = Field(
        default="",
        description="OpenAI-compatible embedding API URL; empty uses the provider default",
    )
    embedding_api_key: str = Field(default="ollama", description="Embedding API key")
    embedding_model: str = Field(
        default="nomic-embed-text",
        description="Embedding model name (must produce 768-dimensional vectors)",
    )
    embedding_dimensions: int | None = Field(
        default=None,
        description="Requested output dimensions, forwarded to providers that support it",
    )

    # Corpus defaults
    default_chunk_size: int = Field(default=512, gt=0, description="Initial chunk size")
    default_chunk_overlap: int = Field(default=50, ge=0, description="Initial chunk overlap")
    default_chunking_strategy: ChunkingStrategy = Field(
        default=ChunkingStrategy.RECURSIVE,
        description="Initial chunking strategy",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Listening host")
    port: int = Field(default=6340, description="Listening port")
    cors_origins: str = Field(
        default="*",
        description="Comma-separated allowed origins, '*' for any",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode, forces DEBUG logging")

    @property
    def resolved_embedding_api_url(self) -> str:
        """Embedding API URL, falling back to the provider default."""
        return self.embedding_api_url or _DEFAULT_EMBEDDING_URLS[self.embedding_provider]

    @property
    def effective_log_level(self) -> str:
        """Log level to configure; debug mode overrides log_level."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
