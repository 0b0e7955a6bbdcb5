"""
Configuration for WorkGraph.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class SimilarityWeights(BaseModel):
    """Weights of the five similarity dimensions. Defaults sum to 1.0."""

    keyword: float = Field(default=0.30, ge=0.0, le=1.0)
    domain: float = Field(default=0.25, ge=0.0, le=1.0)
    location: float = Field(default=0.20, ge=0.0, le=1.0)
    strategic: float = Field(default=0.15, ge=0.0, le=1.0)
    content: float = Field(default=0.10, ge=0.0, le=1.0)


class ReferenceConfig(BaseModel):
    """Reference generation, suggestion and traversal configuration."""

    similarity_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    confidence_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    max_search_keywords: int = Field(default=3, ge=0)
    max_candidates: int = Field(default=20, ge=1)
    max_content_words: int = Field(default=50, ge=1)
    max_keywords: int = Field(default=10, ge=1)
    min_keyword_length: int = Field(default=4, ge=1)
    default_domain: str = "general"
    default_focus_depth: int = Field(default=2, ge=1)
    max_focus_depth: int = Field(default=5, ge=1)
    weights: SimilarityWeights = Field(default_factory=SimilarityWeights)


class StoreConfig(BaseModel):
    """Item store configuration."""

    data_dir: str = "~/.workgraph"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False


class Config(BaseModel):
    """Main configuration."""

    references: ReferenceConfig = Field(default_factory=ReferenceConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Item store backend
    store_backend: str = "yaml"

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Environment variables:
            WORKGRAPH_STORE_BACKEND: Item store backend (yaml, memory)
            WORKGRAPH_DATA_DIR: Root directory of the YAML item store
            WORKGRAPH_SIMILARITY_THRESHOLD: Minimum total score for a reference
            WORKGRAPH_CONFIDENCE_THRESHOLD: Minimum confidence for a suggestion
            WORKGRAPH_MAX_CANDIDATES: Candidate cap per reference generation
            WORKGRAPH_MAX_FOCUS_DEPTH: Upper bound of focused map depth
            WORKGRAPH_LOG_LEVEL: Log level
            WORKGRAPH_LOG_TO_FILE: Enable rotating file logs
            WORKGRAPH_HOST / WORKGRAPH_PORT: API server bind address
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            # bool before int: bool is a subclass of int
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            store_backend=get_env("WORKGRAPH_STORE_BACKEND", "yaml"),
            store=StoreConfig(
                data_dir=get_env("WORKGRAPH_DATA_DIR", "~/.workgraph"),
            ),
            references=ReferenceConfig(
                similarity_threshold=get_env("WORKGRAPH_SIMILARITY_THRESHOLD", 0.7),
                confidence_threshold=get_env("WORKGRAPH_CONFIDENCE_THRESHOLD", 0.6),
                max_search_keywords=get_env("WORKGRAPH_MAX_SEARCH_KEYWORDS", 3),
                max_candidates=get_env("WORKGRAPH_MAX_CANDIDATES", 20),
                max_content_words=get_env("WORKGRAPH_MAX_CONTENT_WORDS", 50),
                default_focus_depth=get_env("WORKGRAPH_DEFAULT_FOCUS_DEPTH", 2),
                max_focus_depth=get_env("WORKGRAPH_MAX_FOCUS_DEPTH", 5),
            ),
            logging=LoggingConfig(
                level=get_env("WORKGRAPH_LOG_LEVEL", "INFO"),
                log_to_file=get_env("WORKGRAPH_LOG_TO_FILE", False),
                log_dir=get_env("WORKGRAPH_LOG_DIR", "logs"),
                file_rotation=get_env("WORKGRAPH_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("WORKGRAPH_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("WORKGRAPH_LOG_COMPRESSION", "zip"),
                serialize=get_env("WORKGRAPH_LOG_SERIALIZE", True),
            ),
            server=ServerConfig(
                host=get_env("WORKGRAPH_HOST", "127.0.0.1"),
                port=get_env("WORKGRAPH_PORT", 8000),
                reload=get_env("WORKGRAPH_RELOAD", False),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Env values that differ from defaults override YAML sections
        default = cls()
        if env_config.references != default.references:
            final_dict["references"] = env_config.references.model_dump()
        if env_config.store != default.store:
            final_dict["store"] = env_config.store.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()
        if env_config.server != default.server:
            final_dict["server"] = env_config.server.model_dump()
        if env_config.store_backend != default.store_backend:
            final_dict["store_backend"] = env_config.store_backend

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
