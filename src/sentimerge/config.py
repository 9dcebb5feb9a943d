"""Application configuration via pydantic-settings."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from sentimerge.core.exceptions import ConfigurationError
from sentimerge.lexicons import BUILTIN_LEXICONS
from sentimerge.processing.sentiment.lexicon import CollisionStrategy


def _split_list(v: str | list[str] | None) -> list[str]:
    """Accept a CSV string, a JSON array string or a list."""
    if v is None:
        return []
    if isinstance(v, str):
        v = v.strip()
        if v.startswith("["):
            v = json.loads(v)
        else:
            v = [item.strip() for item in v.split(",") if item.strip()]
    return list(v)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Core
    env: Literal["development", "staging", "production"] = Field(
        default="development", alias="SENTIMERGE_ENV"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="SENTIMERGE_LOG_LEVEL"
    )

    # Lexicons
    collision_strategy: CollisionStrategy = Field(
        default=CollisionStrategy.average,
        alias="SENTIMERGE_COLLISION_STRATEGY",
        description="How to resolve tokens defined by several lexicons",
    )
    lexicons: Annotated[list[str], NoDecode] = Field(
        default=list(BUILTIN_LEXICONS),
        alias="SENTIMERGE_LEXICONS",
        description="Built-in lexicons to merge, in merge order",
    )
    lexicon_files: Annotated[list[Path], NoDecode] = Field(
        default_factory=list,
        alias="SENTIMERGE_LEXICON_FILES",
        description="Extra JSON lexicon files, merged after the built-ins",
    )
    extra_negations: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="SENTIMERGE_EXTRA_NEGATIONS",
        description="Negation markers added to the built-in set",
    )

    @field_validator("collision_strategy", mode="before")
    @classmethod
    def parse_collision_strategy(cls, v: str | CollisionStrategy) -> CollisionStrategy:
        try:
            return CollisionStrategy.parse(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @field_validator("lexicons", mode="before")
    @classmethod
    def parse_lexicons(cls, v: str | list[str] | None) -> list[str]:
        names = [name.strip().lower() for name in _split_list(v)]
        unknown = [name for name in names if name not in BUILTIN_LEXICONS]
        if unknown:
            raise ValueError(f"Unknown built-in lexicons: {', '.join(unknown)}")
        return names

    @field_validator("lexicon_files", mode="before")
    @classmethod
    def parse_lexicon_files(cls, v: str | list[str] | None) -> list[str]:
        return _split_list(v)

    @field_validator("extra_negations", mode="before")
    @classmethod
    def parse_extra_negations(cls, v: str | list[str] | None) -> list[str]:
        return [w.lower() for w in _split_list(v)]

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings() -> Settings:
    """Get cached settings, reporting invalid values as ConfigurationError.

    Raises:
        ConfigurationError: If an environment or .env value fails validation.
    """
    try:
        return get_settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from e
